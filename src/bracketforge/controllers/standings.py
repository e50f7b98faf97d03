"""League standings aggregation.

Standings are derived data: they are rebuilt from the schedule and the score
table on every call and never stored.
"""

# Bracket Forge
# Copyright (C) 2025  Bracket Forge developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from typing import Dict, List, Optional, Sequence

from bracketforge.constants import DRAW_POINTS, LOSS_POINTS, WIN_POINTS
from bracketforge.models.match import Match
from bracketforge.models.participant import Participant
from bracketforge.models.standing import LeagueStanding
from bracketforge.type_hints import ScoreMap
from bracketforge.utils import setup_logger

logger = setup_logger(__name__)


class StandingsCalculator:
    """Builds a sorted league table from recorded scores.

    Only matches with an entry in the score table count as played. Points
    are 3 for a win and 1 for a draw. Rows are ordered by points, then goal
    difference, then goals for, all descending; rows that tie on all three
    keep roster order.
    """

    def __init__(
        self,
        win_points: int = WIN_POINTS,
        draw_points: int = DRAW_POINTS,
        loss_points: int = LOSS_POINTS,
    ) -> None:
        self.win_points = win_points
        self.draw_points = draw_points
        self.loss_points = loss_points

    def calculate(
        self,
        participants: Sequence[Participant],
        matches: Sequence[Match],
        scores: ScoreMap,
    ) -> List[LeagueStanding]:
        """Compute standings for every participant on the roster.

        Args:
            participants: League roster
            matches: League schedule
            scores: Recorded scores, match id -> (score1, score2)

        Returns:
            Standings sorted best first
        """
        table: Dict[str, LeagueStanding] = {
            p.id: LeagueStanding(participant=p) for p in participants
        }

        for match in matches:
            score = scores.get(match.id)
            if score is None:
                continue
            score1, score2 = score
            if match.participant1 is not None:
                self._apply(table.get(match.participant1.id), score1, score2)
            if match.participant2 is not None:
                self._apply(table.get(match.participant2.id), score2, score1)

        standings = sorted(table.values(), key=LeagueStanding.sort_key)
        logger.debug(
            f"Computed standings for {len(standings)} participants "
            f"from {len(scores)} recorded scores"
        )
        return standings

    def _apply(
        self, row: Optional[LeagueStanding], scored: int, conceded: int
    ) -> None:
        if row is None:
            # participant not on the roster
            return

        row.played += 1
        row.goals_for += scored
        row.goals_against += conceded

        if scored > conceded:
            row.won += 1
            row.points += self.win_points
        elif scored == conceded:
            row.drawn += 1
            row.points += self.draw_points
        else:
            row.lost += 1
            row.points += self.loss_points


def compute_standings(
    participants: Sequence[Participant],
    matches: Sequence[Match],
    scores: ScoreMap,
) -> List[LeagueStanding]:
    """Compute the sorted league table with the default point values."""
    return StandingsCalculator().calculate(participants, matches, scores)


def record_league_score(
    scores: ScoreMap, match_id: str, score1: int, score2: int
) -> ScoreMap:
    """Return a copy of ``scores`` with the entry for ``match_id`` set."""
    updated = dict(scores)
    updated[match_id] = (score1, score2)
    return updated
