"""Participant data class."""

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
from typing import Any, Dict, List, Optional

from bracketforge.constants import (
    BYE_ID_PREFIX,
    BYE_NAME,
    DEFAULT_MIN_PARTICIPANTS,
    PARTICIPANT_ID_PREFIX,
)


@dataclass(frozen=True)
class Participant:
    """A competitor on a roster.

    Participants are created once when the roster is generated and never
    change afterwards.

    Attributes
    ----------
    id : str
        Unique, stable identifier
    name : str
        Display name
    seed : int or None
        Input rank; only used for initial slot ordering
    """

    id: str
    name: str
    seed: Optional[int] = None

    @property
    def is_bye(self) -> bool:
        """Whether this is a synthetic padding opponent."""
        return self.id.startswith(BYE_ID_PREFIX) and self.name == BYE_NAME

    def to_dict(self) -> Dict[str, Any]:
        """Serialize participant to dictionary."""
        return {"id": self.id, "name": self.name, "seed": self.seed}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Participant":
        """Deserialize participant from dictionary."""
        return cls(id=str(data["id"]), name=data["name"], seed=data.get("seed"))


def make_bye(index: int) -> Participant:
    """Create the BYE placeholder for padding slot ``index``."""
    return Participant(id=f"{BYE_ID_PREFIX}{index}", name=BYE_NAME, seed=None)


def generate_participants(
    count: int, minimum: int = DEFAULT_MIN_PARTICIPANTS
) -> List[Participant]:
    """Generate a placeholder roster ``p1..pN``.

    The count is raised to ``minimum`` when smaller.

    Args:
        count: Requested number of participants
        minimum: Smallest roster that will be generated

    Returns:
        Participants named "Participant N" with seeds 1..N
    """
    size = max(count, minimum)
    return [
        Participant(
            id=f"{PARTICIPANT_ID_PREFIX}{i + 1}",
            name=f"Participant {i + 1}",
            seed=i + 1,
        )
        for i in range(size)
    ]
