"""Type hints used in Bracket Forge."""

from typing import Dict, Literal, Tuple

# Bracket side literals
BracketPosition = Literal["left", "right", "final"]

# Competition formats
TournamentType = Literal["league", "elimination"]

# Schedule construction strategies
ScheduleMethod = Literal["greedy", "circle"]

# Which half of a match a participant occupies
Slot = Literal["participant1", "participant2"]

# Advancement outcomes
AdvancementStatus = Literal[
    "ok",
    "not_found",
    "not_propagated",
    "undecided",
    "incomplete",
]

# Score pair (participant1, participant2)
ScorePair = Tuple[int, int]
# League score table keyed by match id
ScoreMap = Dict[str, ScorePair]

#  LocalWords:  ScoreMap ScorePair
