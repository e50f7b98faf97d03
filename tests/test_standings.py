from bracketforge.bracket.round_robin import build_league_schedule
from bracketforge.controllers.standings import (
    StandingsCalculator,
    compute_standings,
    record_league_score,
)
from bracketforge.models.match import Match

from conftest import make_roster


def _league(roster, pairs):
    return [
        Match(
            id=f"m{i + 1}",
            round=1,
            bracket_position="left",
            participant1=roster[a],
            participant2=roster[b],
        )
        for i, (a, b) in enumerate(pairs)
    ]


def test_points_and_totals():
    roster = make_roster("W", "X", "Y", "Z")
    matches = build_league_schedule(roster)
    # m1 W-X, m2 Y-Z, m3 W-Y
    scores = {"m1": (2, 0), "m2": (1, 1), "m3": (0, 3)}

    rows = compute_standings(roster, matches, scores)
    table = {row.participant.name: row for row in rows}

    w = table["W"]
    assert (w.played, w.won, w.drawn, w.lost, w.points) == (2, 1, 0, 1, 3)
    assert (w.goals_for, w.goals_against, w.goal_difference) == (2, 3, -1)
    y = table["Y"]
    assert (y.played, y.won, y.drawn, y.points) == (2, 1, 1, 4)
    assert table["Z"].points == 1
    assert table["X"].points == 0


def test_ordering_by_points():
    roster = make_roster("W", "X", "Y", "Z")
    matches = build_league_schedule(roster)
    scores = {"m1": (2, 0), "m2": (1, 1), "m3": (0, 3)}

    order = [row.participant.name for row in compute_standings(roster, matches, scores)]
    assert order == ["Y", "W", "Z", "X"]


def test_goal_difference_breaks_points_ties():
    roster = make_roster("A", "B", "C", "D")
    matches = _league(roster, [(0, 1), (2, 3)])
    scores = {"m1": (2, 0), "m2": (4, 1)}

    order = [row.participant.name for row in compute_standings(roster, matches, scores)]
    assert order == ["C", "A", "B", "D"]


def test_goals_for_breaks_goal_difference_ties():
    roster = make_roster("C", "D", "A", "B")
    matches = _league(roster, [(2, 3), (0, 1)])
    scores = {"m1": (3, 3), "m2": (1, 1)}

    order = [row.participant.name for row in compute_standings(roster, matches, scores)]
    assert order == ["A", "B", "C", "D"]


def test_full_ties_keep_roster_order():
    roster = make_roster("A", "B", "C", "D")
    order = [row.participant.name for row in compute_standings(roster, [], {})]
    assert order == ["A", "B", "C", "D"]


def test_unscored_matches_do_not_count():
    roster = make_roster("A", "B", "C", "D")
    matches = build_league_schedule(roster)
    for row in compute_standings(roster, matches, {}):
        assert row.played == 0
        assert row.points == 0


def test_standings_are_recomputed_identically():
    roster = make_roster("A", "B", "C", "D")
    matches = build_league_schedule(roster)
    scores = {"m1": (1, 0), "m4": (2, 2)}
    assert compute_standings(roster, matches, scores) == compute_standings(
        roster, matches, scores
    )


def test_custom_point_values():
    roster = make_roster("A", "B")
    matches = _league(roster, [(0, 1)])
    calculator = StandingsCalculator(win_points=2, draw_points=1, loss_points=0)
    table = calculator.calculate(roster, matches, {"m1": (1, 0)})
    assert [row.points for row in table] == [2, 0]


def test_participants_off_the_roster_are_ignored():
    everyone = make_roster("A", "B", "C")
    matches = _league(everyone, [(0, 2)])
    table = compute_standings(everyone[:2], matches, {"m1": (1, 0)})
    assert [row.participant.name for row in table] == ["A", "B"]
    assert table[0].played == 1


def test_record_league_score_returns_a_new_table():
    scores = {"m1": (1, 0)}
    updated = record_league_score(scores, "m2", 2, 2)
    assert updated == {"m1": (1, 0), "m2": (2, 2)}
    assert scores == {"m1": (1, 0)}

    assert record_league_score(updated, "m1", 0, 3)["m1"] == (0, 3)
