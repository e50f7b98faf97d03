import pytest

from bracketforge.controllers.tournament_manager import TournamentManager
from bracketforge.exceptions import (
    InvalidConfigurationException,
    InvalidResultException,
    InvalidRosterException,
    MatchNotFoundException,
    NoActiveTournamentException,
    ParticipantNotInMatchException,
    PermissionDeniedException,
    TournamentNotFoundException,
    TournamentTypeException,
)
from bracketforge.models.participant import Participant
from bracketforge.models.tournament import TournamentConfig

from conftest import make_roster


@pytest.fixture
def admin():
    return TournamentManager(is_admin=True)


def test_mutations_require_admin():
    manager = TournamentManager()
    with pytest.raises(PermissionDeniedException):
        manager.quick_create("Cup", "elimination", 8)


def test_generated_roster_is_raised_to_minimum(admin):
    tournament = admin.quick_create("Cup", "elimination", 4)
    assert [p.id for p in tournament.participants] == [f"p{i}" for i in range(1, 9)]
    assert len(tournament.matches) == 7
    assert tournament.id.startswith("t")
    assert admin.active is tournament


def test_explicit_roster(admin):
    config = TournamentConfig(name="Club Night", type="elimination")
    roster = make_roster("A", "B", "C")
    tournament = admin.create_tournament(config, participants=roster)
    assert [p.name for p in tournament.participants] == ["A", "B", "C"]
    assert len(tournament.matches) == 3


def test_blank_name_gets_a_default(admin):
    tournament = admin.create_tournament(TournamentConfig(name="  "), 8)
    assert tournament.name == "Untitled Tournament"


def test_league_creation(admin):
    config = TournamentConfig(
        name="Spring League", type="league", schedule_method="circle"
    )
    roster = make_roster("A", "B", "C", "D")
    tournament = admin.create_tournament(config, participants=roster)
    assert tournament.is_league
    assert len(tournament.matches) == 6


def test_invalid_rosters_are_rejected(admin):
    config = TournamentConfig(name="Cup")
    with pytest.raises(InvalidRosterException):
        admin.create_tournament(config, participants=make_roster("Solo"))
    duplicate = [Participant("a", "A"), Participant("a", "Again")]
    with pytest.raises(InvalidRosterException):
        admin.create_tournament(config, participants=duplicate)
    assert admin.tournaments == []


def test_unknown_type_is_rejected(admin):
    with pytest.raises(InvalidConfigurationException):
        admin.quick_create("Cup", "swiss", 8)


def test_decide_through_to_champion(admin):
    admin.quick_create("Cup", "elimination", 8)
    for match_id, winner_id in [
        ("m1", "p1"),
        ("m2", "p3"),
        ("m3", "p5"),
        ("m4", "p7"),
        ("m5", "p3"),
        ("m6", "p5"),
    ]:
        assert admin.decide_match(match_id, winner_id)

    final = admin.active.get_match("m7")
    assert (final.participant1.id, final.participant2.id) == ("p3", "p5")
    assert admin.champion() is None
    admin.decide_match("m7", "p5")
    assert admin.champion().id == "p5"


def test_decide_rejects_outsiders_and_unknown_matches(admin):
    admin.quick_create("Cup", "elimination", 8)
    with pytest.raises(ParticipantNotInMatchException):
        admin.decide_match("m1", "p8")
    with pytest.raises(MatchNotFoundException):
        admin.decide_match("m99", "p1")


def test_update_score_accepts_numeric_strings(admin):
    admin.quick_create("Cup", "elimination", 8)
    result = admin.update_score("m1", "0", "3")
    assert result.winner.id == "p2"
    assert admin.active.get_match("m5").participant1.id == "p2"


def test_update_score_rejects_bad_values(admin):
    admin.quick_create("Cup", "elimination", 8)
    with pytest.raises(InvalidResultException):
        admin.update_score("m1", -1, 2)
    with pytest.raises(InvalidResultException):
        admin.update_score("m1", "two", 2)


def test_update_score_on_empty_match_changes_nothing(admin):
    tournament = admin.quick_create("Cup", "elimination", 8)
    before = list(tournament.matches)
    result = admin.update_score("m5", 1, 0)
    assert result.status == "incomplete"
    assert admin.active.matches == before


def test_operations_check_tournament_type(admin):
    admin.quick_create("League", "league", 4)
    with pytest.raises(TournamentTypeException):
        admin.decide_match("m1", "p1")
    with pytest.raises(TournamentTypeException):
        admin.champion()

    admin.quick_create("Cup", "elimination", 8)
    with pytest.raises(TournamentTypeException):
        admin.record_league_score("m1", 1, 0)
    with pytest.raises(TournamentTypeException):
        admin.standings()


def test_league_scores_and_standings(admin):
    config = TournamentConfig(name="League", type="league")
    admin.create_tournament(config, participants=make_roster("W", "X", "Y", "Z"))
    admin.record_league_score("m1", 2, 0)
    admin.record_league_score("m2", 1, 1)
    admin.record_league_score("m3", 0, 3)

    assert admin.active.scores["m3"] == (0, 3)
    assert [row.participant.name for row in admin.standings()] == ["Y", "W", "Z", "X"]
    # league matches themselves are never decided
    assert all(m.winner is None for m in admin.active.matches)

    with pytest.raises(MatchNotFoundException):
        admin.record_league_score("m99", 1, 0)


def test_admin_flag_can_be_revoked(admin):
    admin.quick_create("League", "league", 4)
    admin.is_admin = False
    with pytest.raises(PermissionDeniedException):
        admin.record_league_score("m1", 1, 0)
    # reading stays open
    assert len(admin.standings()) == 8


def test_switching_and_deleting_tournaments(admin):
    first = admin.quick_create("First", "elimination", 8)
    second = admin.quick_create("Second", "league", 8)
    assert admin.active is second

    admin.set_active(first.id)
    assert admin.active is first

    admin.delete_tournament(first.id)
    assert admin.active is None
    assert admin.tournaments == [second]

    with pytest.raises(TournamentNotFoundException):
        admin.get_tournament(first.id)
    with pytest.raises(NoActiveTournamentException):
        admin.decide_match("m1", "p1")


def test_delete_requires_admin(admin):
    tournament = admin.quick_create("Cup", "elimination", 8)
    admin.is_admin = False
    with pytest.raises(PermissionDeniedException):
        admin.delete_tournament(tournament.id)


def test_update_score_rejects_unknown_match(admin):
    tournament = admin.quick_create("Cup", "elimination", 8)
    before = list(tournament.matches)
    with pytest.raises(MatchNotFoundException):
        admin.update_score("m99", 1, 0)
    assert admin.active.matches == before


def test_roster_id_shaped_like_a_bye_stays_distinct(admin):
    roster = [
        Participant("bye-0", "Alice"),
        Participant("b", "Bob"),
        Participant("c", "Cara"),
    ]
    config = TournamentConfig(name="x")
    tournament = admin.create_tournament(config, participants=roster)

    right = tournament.get_match("m2")
    assert right.participant1.id == "c"
    assert right.participant2.id == "bye-1"
    assert right.participant2.is_bye

    result = admin.decide_match("m1", "bye-0")
    assert result.winner.name == "Alice"
