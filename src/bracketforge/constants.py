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

# --- Constants ---

# Tournament types
TYPE_LEAGUE = "league"
TYPE_ELIMINATION = "elimination"
TOURNAMENT_TYPES = (TYPE_LEAGUE, TYPE_ELIMINATION)

# Bracket positions
POSITION_LEFT = "left"
POSITION_RIGHT = "right"
POSITION_FINAL = "final"
BRACKET_POSITIONS = (POSITION_LEFT, POSITION_RIGHT, POSITION_FINAL)

# Slots in a match
SLOT_PARTICIPANT1 = "participant1"
SLOT_PARTICIPANT2 = "participant2"

# League points
WIN_POINTS = 3
DRAW_POINTS = 1
LOSS_POINTS = 0

# Byes
BYE_NAME = "BYE"
BYE_ID_PREFIX = "bye-"

# Identifier prefixes
MATCH_ID_PREFIX = "m"
PARTICIPANT_ID_PREFIX = "p"
TOURNAMENT_ID_PREFIX = "t"

# Rosters
MIN_ROSTER_SIZE = 2
DEFAULT_MIN_PARTICIPANTS = 8  # Generated rosters are never smaller than this

# League scheduling methods
SCHEDULE_GREEDY = "greedy"
SCHEDULE_CIRCLE = "circle"
SCHEDULE_METHODS = (SCHEDULE_GREEDY, SCHEDULE_CIRCLE)
DEFAULT_SCHEDULE_METHOD = SCHEDULE_GREEDY

# Round labels for elimination brackets
ROUND_NAME_FINAL = "Final"
ROUND_NAME_SEMI_FINAL = "Semi Final"
ROUND_NAME_QUARTER_FINAL = "Quarter Final"

# Advancement outcomes
STATUS_OK = "ok"
STATUS_NOT_FOUND = "not_found"
STATUS_NOT_PROPAGATED = "not_propagated"
STATUS_UNDECIDED = "undecided"
STATUS_INCOMPLETE = "incomplete"
