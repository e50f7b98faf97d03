"""Round-robin league scheduling.

Two constructions are available:

- ``greedy`` (default): week by week, each unpaired participant in roster
  order takes the first later unpaired opponent it has not met yet. There is
  no backtracking, so some rosters end up with incomplete weeks (six
  participants in roster order is one). It is kept as the default because
  existing schedules were produced this way.
- ``circle``: the polygon rotation method. One participant stays fixed and
  the rest rotate, which always gives a complete round robin.

Neither method adds a BYE participant for odd rosters; whoever is left
over simply has no match that week.
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

from typing import List, Optional, Sequence, Set

from bracketforge.constants import (
    MATCH_ID_PREFIX,
    POSITION_LEFT,
    SCHEDULE_CIRCLE,
    SCHEDULE_GREEDY,
)
from bracketforge.exceptions import InvalidConfigurationException
from bracketforge.models.match import Match
from bracketforge.models.participant import Participant
from bracketforge.utils import setup_logger

logger = setup_logger(__name__)


class _ScheduleWriter:
    """Accumulates league matches with sequential ids."""

    def __init__(self) -> None:
        self.matches: List[Match] = []
        self.previous_pairs: Set[frozenset] = set()

    def have_played(self, first: Participant, second: Participant) -> bool:
        return frozenset({first.id, second.id}) in self.previous_pairs

    def add(self, week: int, first: Participant, second: Participant) -> None:
        self.matches.append(
            Match(
                id=f"{MATCH_ID_PREFIX}{len(self.matches) + 1}",
                round=week,
                bracket_position=POSITION_LEFT,
                participant1=first,
                participant2=second,
            )
        )
        self.previous_pairs.add(frozenset({first.id, second.id}))


def build_greedy_schedule(participants: Sequence[Participant]) -> List[Match]:
    """Greedy week-by-week pairing with a no-repeat check.

    Runs ``len(participants) - 1`` weeks. In each week the roster is scanned
    in order; the first participant not yet used that week is paired with
    the first later participant who is also free and whom they have not met
    in an earlier week.

    Args:
        participants: Roster in order; an even size is expected

    Returns:
        Matches in creation order, ``round`` set to the week number
    """
    roster = list(participants)
    writer = _ScheduleWriter()
    weeks = len(roster) - 1

    for week in range(1, weeks + 1):
        used_this_week: Set[str] = set()

        for i, home in enumerate(roster):
            if home.id in used_this_week:
                continue

            for away in roster[i + 1 :]:
                if away.id in used_this_week or writer.have_played(home, away):
                    continue
                writer.add(week, home, away)
                used_this_week.add(home.id)
                used_this_week.add(away.id)
                break

        paired = len(used_this_week)
        if paired < len(roster) - len(roster) % 2:
            logger.warning(
                f"Week {week}: only {paired} of {len(roster)} participants paired"
            )

    return writer.matches


def _rotate(rotation: List[Optional[Participant]]) -> List[Optional[Participant]]:
    if len(rotation) <= 2:
        return rotation[:]
    return [rotation[0], rotation[-1], *rotation[1:-1]]


def build_circle_schedule(participants: Sequence[Participant]) -> List[Match]:
    """Circle-method round robin.

    Odd rosters get an empty seat; whoever faces it sits the week out.
    Produces ``n - 1`` weeks for even ``n`` and ``n`` weeks for odd ``n``.
    """
    rotation: List[Optional[Participant]] = list(participants)
    if len(rotation) % 2 != 0:
        rotation.append(None)

    writer = _ScheduleWriter()
    weeks = len(rotation) - 1
    half = len(rotation) // 2

    for week in range(1, weeks + 1):
        for i in range(half):
            home, away = rotation[i], rotation[-(i + 1)]
            if home is None or away is None:
                continue
            writer.add(week, home, away)
        rotation = _rotate(rotation)

    return writer.matches


def build_league_schedule(
    participants: Sequence[Participant], method: str = SCHEDULE_GREEDY
) -> List[Match]:
    """Build a league schedule.

    Every match has ``bracket_position = "left"`` and no forward link;
    scores start unset.

    Args:
        participants: Roster in order
        method: ``"greedy"`` (default) or ``"circle"``

    Raises:
        InvalidConfigurationException: If ``method`` is unknown
    """
    if method == SCHEDULE_GREEDY:
        matches = build_greedy_schedule(participants)
    elif method == SCHEDULE_CIRCLE:
        matches = build_circle_schedule(participants)
    else:
        raise InvalidConfigurationException(f"Unknown schedule method '{method}'")

    logger.info(
        f"Built {method} league schedule: {len(participants)} participants, "
        f"{count_weeks(matches)} weeks, {len(matches)} matches"
    )
    return matches


def count_weeks(matches: Sequence[Match]) -> int:
    """Number of weeks in a schedule (highest ``round``), 0 when empty."""
    return max((m.round for m in matches), default=0)


def matches_for_week(matches: Sequence[Match], week: int) -> List[Match]:
    """Matches scheduled in ``week``, in schedule order."""
    return [m for m in matches if m.round == week]
