"""Tournament and tournament configuration data classes."""

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

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from dateutil.parser import isoparse

from bracketforge.constants import (
    DEFAULT_MIN_PARTICIPANTS,
    DEFAULT_SCHEDULE_METHOD,
    TYPE_ELIMINATION,
    TYPE_LEAGUE,
)
from bracketforge.models.match import Match
from bracketforge.models.participant import Participant
from bracketforge.type_hints import ScheduleMethod, ScoreMap, TournamentType


@dataclass
class TournamentConfig:
    """Configuration settings for creating a tournament.

    Attributes:
        name: Tournament name
        type: Competition format ('league' or 'elimination')
        min_participants: Smallest roster generated for this tournament
        schedule_method: League schedule construction ('greedy' or 'circle')
    """

    name: str
    type: TournamentType = TYPE_ELIMINATION
    min_participants: int = DEFAULT_MIN_PARTICIPANTS
    schedule_method: ScheduleMethod = DEFAULT_SCHEDULE_METHOD

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "name": self.name,
            "type": self.type,
            "min_participants": self.min_participants,
            "schedule_method": self.schedule_method,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TournamentConfig":
        """Deserialize configuration from dictionary."""
        return cls(
            name=data.get("name", "Untitled Tournament"),
            type=data.get("type", TYPE_ELIMINATION),
            min_participants=data.get("min_participants", DEFAULT_MIN_PARTICIPANTS),
            schedule_method=data.get("schedule_method", DEFAULT_SCHEDULE_METHOD),
        )


@dataclass
class Tournament:
    """A competition and everything recorded for it.

    The tournament owns its match list exclusively. Engine calls receive the
    whole list and hand back a replacement; the coordinator swaps it in.

    Attributes:
        id: Unique tournament id
        name: Display name
        type: 'league' or 'elimination'
        participants: Roster in seeding order
        matches: Current match snapshot
        created_at: Creation time (timezone-aware)
        scores: League score table, match id -> (score1, score2)
    """

    id: str
    name: str
    type: TournamentType
    participants: List[Participant] = field(default_factory=list)
    matches: List[Match] = field(default_factory=list)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    scores: ScoreMap = field(default_factory=dict)

    @property
    def is_league(self) -> bool:
        return self.type == TYPE_LEAGUE

    @property
    def is_elimination(self) -> bool:
        return self.type == TYPE_ELIMINATION

    def get_match(self, match_id: str) -> Optional[Match]:
        """Look up a match in the current snapshot."""
        for match in self.matches:
            if match.id == match_id:
                return match
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize tournament to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type,
            "participants": [p.to_dict() for p in self.participants],
            "matches": [m.to_dict() for m in self.matches],
            "created_at": self.created_at.isoformat(),
            "scores": {k: list(v) for k, v in self.scores.items()},
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Tournament":
        """Deserialize tournament from dictionary."""
        created_at = data.get("created_at")
        return cls(
            id=data["id"],
            name=data.get("name", "Untitled Tournament"),
            type=data["type"],
            participants=[
                Participant.from_dict(p) for p in data.get("participants", [])
            ],
            matches=[Match.from_dict(m) for m in data.get("matches", [])],
            created_at=(
                isoparse(created_at) if created_at else datetime.now(timezone.utc)
            ),
            scores={k: tuple(v) for k, v in data.get("scores", {}).items()},
        )
