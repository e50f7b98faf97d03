"""League standing data class."""

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

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from bracketforge.models.participant import Participant


@dataclass
class LeagueStanding:
    """One row of a league table.

    Derived from recorded scores on every query; never stored.

    Attributes
    ----------
    participant : Participant
    played, won, drawn, lost : int
        Match counts
    points : int
        3 per win, 1 per draw
    goals_for, goals_against : int
        Score totals for and against
    """

    participant: Participant
    played: int = 0
    won: int = 0
    drawn: int = 0
    lost: int = 0
    points: int = 0
    goals_for: int = 0
    goals_against: int = 0

    @property
    def goal_difference(self) -> int:
        return self.goals_for - self.goals_against

    def sort_key(self) -> Tuple[int, int, int]:
        """Ordering key: points, then goal difference, then goals for."""
        return (-self.points, -self.goal_difference, -self.goals_for)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "participant": self.participant.to_dict(),
            "played": self.played,
            "won": self.won,
            "drawn": self.drawn,
            "lost": self.lost,
            "points": self.points,
            "goals_for": self.goals_for,
            "goals_against": self.goals_against,
            "goal_difference": self.goal_difference,
        }
