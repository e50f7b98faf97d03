import itertools

import pytest

from bracketforge.bracket.round_robin import (
    build_circle_schedule,
    build_greedy_schedule,
    build_league_schedule,
    count_weeks,
    matches_for_week,
)
from bracketforge.exceptions import InvalidConfigurationException
from bracketforge.models.participant import generate_participants

from conftest import make_roster


def _pairs(matches):
    return [frozenset({m.participant1.id, m.participant2.id}) for m in matches]


def _assert_no_double_booking(matches):
    for week in range(1, count_weeks(matches) + 1):
        seen = set()
        for match in matches_for_week(matches, week):
            for participant in (match.participant1, match.participant2):
                assert participant.id not in seen
                seen.add(participant.id)


def test_greedy_four_participants():
    matches = build_league_schedule(make_roster("W", "X", "Y", "Z"))
    weeks = [
        [
            (m.participant1.name, m.participant2.name)
            for m in matches_for_week(matches, w)
        ]
        for w in (1, 2, 3)
    ]
    assert weeks == [
        [("W", "X"), ("Y", "Z")],
        [("W", "Y"), ("X", "Z")],
        [("W", "Z"), ("X", "Y")],
    ]
    assert [m.id for m in matches] == [f"m{i}" for i in range(1, 7)]
    assert len(set(_pairs(matches))) == 6


def test_league_matches_have_no_forward_links():
    for match in build_league_schedule(make_roster("A", "B", "C", "D")):
        assert match.bracket_position == "left"
        assert match.next_match_id is None
        assert match.winner is None
        assert match.score1 is None and match.score2 is None


def test_greedy_never_repeats_a_pair():
    matches = build_greedy_schedule(generate_participants(10))
    pairs = _pairs(matches)
    assert len(pairs) == len(set(pairs))
    _assert_no_double_booking(matches)


@pytest.mark.parametrize("n", range(2, 13))
def test_circle_schedule_is_complete(n):
    roster = generate_participants(n, minimum=1)
    matches = build_circle_schedule(roster)
    ids = [p.id for p in roster]
    expected = {frozenset(pair) for pair in itertools.combinations(ids, 2)}
    assert set(_pairs(matches)) == expected
    assert len(matches) == len(expected)
    assert count_weeks(matches) == (n - 1 if n % 2 == 0 else n)
    _assert_no_double_booking(matches)


def test_odd_roster_gets_no_bye_matches():
    for method in ("greedy", "circle"):
        matches = build_league_schedule(make_roster("A", "B", "C", "D", "E"), method)
        for match in matches:
            assert match.participant1 is not None and match.participant2 is not None
            assert not match.has_bye


def test_circle_odd_roster_sits_one_out_each_week():
    matches = build_circle_schedule(make_roster("A", "B", "C", "D", "E"))
    for week in range(1, 6):
        assert len(matches_for_week(matches, week)) == 2


def test_unknown_method_raises():
    with pytest.raises(InvalidConfigurationException):
        build_league_schedule(make_roster("A", "B"), "swiss")


def test_count_weeks_of_empty_schedule():
    assert count_weeks([]) == 0
    assert build_league_schedule([]) == []
