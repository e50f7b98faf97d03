"""Match-graph construction: elimination brackets and league schedules."""

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

from bracketforge.bracket.elimination import (
    build_elimination_bracket,
    count_rounds,
    get_round_name,
    next_power_of_two,
    pad_roster,
)
from bracketforge.bracket.match_graph import MatchGraph, validate_bracket
from bracketforge.bracket.round_robin import (
    build_circle_schedule,
    build_greedy_schedule,
    build_league_schedule,
    count_weeks,
    matches_for_week,
)

__all__ = [
    "MatchGraph",
    "build_elimination_bracket",
    "build_league_schedule",
    "build_greedy_schedule",
    "build_circle_schedule",
    "count_rounds",
    "count_weeks",
    "get_round_name",
    "matches_for_week",
    "next_power_of_two",
    "pad_roster",
    "validate_bracket",
]
