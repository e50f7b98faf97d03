"""Result handling for Bracket Forge.

This package records results against a match snapshot: the advancement
engine for elimination brackets, the standings aggregator for leagues, and
the coordinator that owns tournaments between calls.
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

from bracketforge.controllers.advancement import (
    AdvancementResult,
    advance,
    advance_with_scores,
    decide_match,
    determine_winner,
    find_advancement_slot,
    get_champion,
    record_score,
)
from bracketforge.controllers.standings import (
    StandingsCalculator,
    compute_standings,
    record_league_score,
)
from bracketforge.controllers.tournament_manager import TournamentManager

__all__ = [
    "AdvancementResult",
    "StandingsCalculator",
    "TournamentManager",
    "advance",
    "advance_with_scores",
    "compute_standings",
    "decide_match",
    "determine_winner",
    "find_advancement_slot",
    "get_champion",
    "record_league_score",
    "record_score",
]
