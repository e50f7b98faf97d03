"""Match data class."""

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
from typing import Any, Dict, Optional

from bracketforge.constants import POSITION_FINAL, SLOT_PARTICIPANT1
from bracketforge.models.participant import Participant
from bracketforge.type_hints import BracketPosition, Slot


@dataclass(frozen=True)
class Match:
    """A single fixture in a bracket or league schedule.

    ``id``, ``round``, ``bracket_position`` and ``next_match_id`` are fixed when
    the match is built. The remaining fields change only through the
    advancement engine or score entry, which always return a new ``Match``
    via ``dataclasses.replace`` instead of editing this one.

    Attributes
    ----------
    id : str
        Unique within its tournament; compared as a plain string
    round : int
        1-based elimination stage, or week number in a league
    bracket_position : str
        ``"left"``, ``"right"`` or ``"final"``
    participant1, participant2 : Participant or None
        The two slots; empty until filled by seeding or advancement
    winner : Participant or None
        Set once the match is decided
    next_match_id : str or None
        Id of the match the winner advances to; a lookup key, not a reference
    score1, score2 : int or None
        Recorded scores for each slot
    """

    id: str
    round: int
    bracket_position: BracketPosition
    participant1: Optional[Participant] = None
    participant2: Optional[Participant] = None
    winner: Optional[Participant] = None
    next_match_id: Optional[str] = None
    score1: Optional[int] = None
    score2: Optional[int] = None

    @property
    def is_final(self) -> bool:
        return self.bracket_position == POSITION_FINAL

    @property
    def is_decided(self) -> bool:
        return self.winner is not None

    @property
    def has_bye(self) -> bool:
        """Whether either slot holds a BYE placeholder."""
        return any(
            p is not None and p.is_bye for p in (self.participant1, self.participant2)
        )

    @property
    def is_ready(self) -> bool:
        """Whether both slots are filled."""
        return self.participant1 is not None and self.participant2 is not None

    def involves(self, participant_id: str) -> bool:
        """Check whether a participant occupies either slot."""
        return any(
            p is not None and p.id == participant_id
            for p in (self.participant1, self.participant2)
        )

    def get_slot(self, slot: Slot) -> Optional[Participant]:
        """Return the participant in ``slot``."""
        if slot == SLOT_PARTICIPANT1:
            return self.participant1
        return self.participant2

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match to dictionary."""
        return {
            "id": self.id,
            "round": self.round,
            "bracket_position": self.bracket_position,
            "participant1": self.participant1.to_dict() if self.participant1 else None,
            "participant2": self.participant2.to_dict() if self.participant2 else None,
            "winner": self.winner.to_dict() if self.winner else None,
            "next_match_id": self.next_match_id,
            "score1": self.score1,
            "score2": self.score2,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Match":
        """Deserialize match from dictionary."""

        def _participant(key: str) -> Optional[Participant]:
            value = data.get(key)
            return Participant.from_dict(value) if value else None

        return cls(
            id=data["id"],
            round=data["round"],
            bracket_position=data["bracket_position"],
            participant1=_participant("participant1"),
            participant2=_participant("participant2"),
            winner=_participant("winner"),
            next_match_id=data.get("next_match_id"),
            score1=data.get("score1"),
            score2=data.get("score2"),
        )
