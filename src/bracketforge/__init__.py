"""Bracket Forge - elimination brackets and round-robin leagues.

Build a bracket or a league schedule from a roster, then feed results back
in and get the next match snapshot out.
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

from bracketforge.bracket import (
    MatchGraph,
    build_elimination_bracket,
    build_league_schedule,
    validate_bracket,
)
from bracketforge.controllers import (
    AdvancementResult,
    TournamentManager,
    compute_standings,
    decide_match,
    record_score,
)
from bracketforge.models import (
    LeagueStanding,
    Match,
    Participant,
    Tournament,
    TournamentConfig,
    generate_participants,
)

__version__ = "0.1.0"

__all__ = [
    "AdvancementResult",
    "LeagueStanding",
    "Match",
    "MatchGraph",
    "Participant",
    "Tournament",
    "TournamentConfig",
    "TournamentManager",
    "build_elimination_bracket",
    "build_league_schedule",
    "compute_standings",
    "decide_match",
    "generate_participants",
    "record_score",
    "validate_bracket",
]
