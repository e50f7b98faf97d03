import pytest

from bracketforge.bracket.elimination import (
    build_elimination_bracket,
    count_rounds,
    get_round_name,
    next_power_of_two,
    pad_roster,
)
from bracketforge.bracket.match_graph import MatchGraph, validate_bracket
from bracketforge.models.participant import Participant, generate_participants


def _by_id(matches):
    return {m.id: m for m in matches}


@pytest.mark.parametrize("n", range(1, 34))
def test_match_count_is_bracket_size_minus_one(n):
    matches = build_elimination_bracket(generate_participants(n, minimum=1))
    assert len(matches) == next_power_of_two(n) - 1
    assert [m.id for m in matches] == [f"m{i}" for i in range(1, len(matches) + 1)]


@pytest.mark.parametrize("n", range(1, 34))
def test_built_brackets_pass_structural_validation(n):
    matches = build_elimination_bracket(generate_participants(n, minimum=1))
    result = validate_bracket(matches)
    assert result, result.error_message
    assert sum(1 for m in matches if m.is_final) == 1


def test_eight_participant_layout(bracket8):
    layout = [(m.id, m.round, m.bracket_position, m.next_match_id) for m in bracket8]
    assert layout == [
        ("m1", 1, "left", "m5"),
        ("m2", 1, "left", "m5"),
        ("m3", 1, "right", "m6"),
        ("m4", 1, "right", "m6"),
        ("m5", 2, "left", "m7"),
        ("m6", 2, "right", "m7"),
        ("m7", 3, "final", None),
    ]


def test_first_round_seeding_splits_roster_in_half(bracket8):
    matches = _by_id(bracket8)
    pairs = [
        (matches[mid].participant1.id, matches[mid].participant2.id)
        for mid in ("m1", "m2", "m3", "m4")
    ]
    assert pairs == [("p1", "p2"), ("p3", "p4"), ("p5", "p6"), ("p7", "p8")]
    for mid in ("m5", "m6", "m7"):
        assert matches[mid].participant1 is None
        assert matches[mid].participant2 is None


def test_new_matches_start_undecided_with_zero_scores(bracket8):
    for match in bracket8:
        assert match.winner is None
        assert (match.score1, match.score2) == (0, 0)


def test_short_roster_is_padded_with_byes():
    matches = _by_id(build_elimination_bracket(generate_participants(5, minimum=1)))
    assert matches["m3"].participant1.id == "p5"
    assert matches["m3"].participant2.is_bye
    assert matches["m4"].participant1.is_bye
    assert matches["m4"].participant2.is_bye
    # BYE matches are not resolved on their own
    assert matches["m3"].winner is None


def test_three_participants():
    matches = build_elimination_bracket(generate_participants(3, minimum=1))
    assert [(m.id, m.bracket_position) for m in matches] == [
        ("m1", "left"),
        ("m2", "right"),
        ("m3", "final"),
    ]
    assert matches[1].participant1.id == "p3"
    assert matches[1].participant2.is_bye


def test_two_participants_meet_in_the_final():
    matches = build_elimination_bracket(generate_participants(2, minimum=1))
    assert len(matches) == 1
    final = matches[0]
    assert final.is_final
    assert final.next_match_id is None
    assert (final.participant1.id, final.participant2.id) == ("p1", "p2")


def test_single_participant_faces_a_bye_in_the_final():
    matches = build_elimination_bracket(generate_participants(1, minimum=1))
    assert len(matches) == 1
    assert matches[0].participant1.id == "p1"
    assert matches[0].participant2.is_bye


def test_pad_roster_appends_unique_byes():
    padded = pad_roster(generate_participants(9, minimum=1))
    assert len(padded) == 16
    byes = [p for p in padded if p.is_bye]
    assert len(byes) == 7
    assert len({p.id for p in byes}) == 7
    assert [p.id for p in padded[:9]] == [f"p{i}" for i in range(1, 10)]


@pytest.mark.parametrize(
    "n, expected", [(0, 2), (1, 2), (2, 2), (3, 4), (8, 8), (9, 16), (33, 64)]
)
def test_next_power_of_two(n, expected):
    assert next_power_of_two(n) == expected


def test_feeders_use_string_order_of_ids():
    graph = MatchGraph(build_elimination_bracket(generate_participants(16)))
    assert [m.id for m in graph.feeders_of("m13")] == ["m10", "m9"]


@pytest.mark.parametrize(
    "round_number, total, name",
    [
        (3, 3, "Final"),
        (2, 3, "Semi Final"),
        (1, 3, "Quarter Final"),
        (1, 4, "Round 1"),
        (2, 5, "Round 2"),
        (1, 1, "Final"),
    ],
)
def test_round_names(round_number, total, name):
    assert get_round_name(round_number, total) == name


def test_byes_skip_ids_already_on_the_roster():
    roster = [
        Participant("bye-0", "Alice"),
        Participant("b", "Bob"),
        Participant("c", "Cara"),
    ]
    padded = pad_roster(roster)
    assert [p.id for p in padded] == ["bye-0", "b", "c", "bye-1"]
    assert not padded[0].is_bye
    assert padded[3].is_bye

    matches = build_elimination_bracket(roster)
    slot_ids = [
        p.id for m in matches for p in (m.participant1, m.participant2) if p is not None
    ]
    assert len(slot_ids) == len(set(slot_ids))


@pytest.mark.parametrize("n, rounds", [(1, 1), (2, 1), (3, 2), (8, 3), (9, 4)])
def test_count_rounds(n, rounds):
    matches = build_elimination_bracket(generate_participants(n, minimum=1))
    assert count_rounds(matches) == rounds


def test_count_rounds_of_empty_bracket():
    assert count_rounds([]) == 0
