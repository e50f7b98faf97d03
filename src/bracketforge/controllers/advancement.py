"""Match decisions and winner advancement for elimination brackets.

This module records a decided match and moves its winner into the right
slot of the downstream match. Every call takes a complete match snapshot
and returns a new one; the input list and its matches are never modified.
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

from dataclasses import dataclass, replace
from typing import List, Optional, Sequence

from bracketforge.bracket.match_graph import MatchGraph
from bracketforge.constants import (
    POSITION_FINAL,
    POSITION_LEFT,
    POSITION_RIGHT,
    SLOT_PARTICIPANT1,
    SLOT_PARTICIPANT2,
    STATUS_INCOMPLETE,
    STATUS_NOT_FOUND,
    STATUS_NOT_PROPAGATED,
    STATUS_OK,
    STATUS_UNDECIDED,
)
from bracketforge.models.match import Match
from bracketforge.models.participant import Participant
from bracketforge.type_hints import AdvancementStatus, Slot
from bracketforge.utils import setup_logger

logger = setup_logger(__name__)


@dataclass
class AdvancementResult:
    """Outcome of a decision or score entry.

    ``matches`` is always the snapshot to keep, even when nothing changed.
    The result is truthy only when a winner was recorded and advanced.

    Attributes:
        status: 'ok', 'not_found', 'not_propagated', 'undecided' or 'incomplete'
        matches: Updated match snapshot
        match_id: The match that was decided
        winner: Winner recorded on the decided match, if any
        target_id: Downstream match that received the winner
        slot: Slot written on the downstream match
    """

    status: AdvancementStatus
    matches: List[Match]
    match_id: str
    winner: Optional[Participant] = None
    target_id: Optional[str] = None
    slot: Optional[Slot] = None

    def __bool__(self) -> bool:
        return self.status == STATUS_OK


def determine_winner(
    match: Match, score1: int, score2: int
) -> Optional[Participant]:
    """Winner implied by a score pair; ``None`` on a tie."""
    if score1 > score2:
        return match.participant1
    if score1 < score2:
        return match.participant2
    return None


def find_advancement_slot(graph: MatchGraph, decided: Match) -> Optional[Slot]:
    """Slot of the downstream match that the winner of ``decided`` fills.

    Into the final, the decided match's side picks the slot: left fills
    participant1 and right fills participant2. Elsewhere the feeders that
    share the target, round and side are sorted by id as plain strings, and
    the first fills participant1 and the second fills participant2. The
    order in which matches get decided never matters.

    Returns:
        'participant1', 'participant2', or None if no slot applies
    """
    target = graph.get(decided.next_match_id)
    if target is None:
        return None

    if target.bracket_position == POSITION_FINAL:
        if decided.bracket_position == POSITION_LEFT:
            return SLOT_PARTICIPANT1
        if decided.bracket_position == POSITION_RIGHT:
            return SLOT_PARTICIPANT2
        return None

    feeders = graph.feeders_of(target.id, decided.round, decided.bracket_position)
    rank = next((i for i, m in enumerate(feeders) if m.id == decided.id), None)
    if rank == 0:
        return SLOT_PARTICIPANT1
    if rank == 1:
        return SLOT_PARTICIPANT2
    return None


def _propagate(graph: MatchGraph, decided: Match) -> AdvancementResult:
    """Write the winner of ``decided`` into its downstream slot."""
    target = graph.get(decided.next_match_id)
    slot = find_advancement_slot(graph, decided) if target is not None else None

    if target is None or slot is None:
        if decided.next_match_id is not None:
            logger.warning(
                f"Match {decided.id}: winner recorded but not advanced, "
                f"no slot in {decided.next_match_id}"
            )
        return AdvancementResult(
            status=STATUS_NOT_PROPAGATED,
            matches=graph.to_list(),
            match_id=decided.id,
            winner=decided.winner,
        )

    previous = target.get_slot(slot)
    if previous is not None and previous.id != decided.winner.id:
        # Re-decisions overwrite the slot; later rounds are left as they are.
        logger.warning(
            f"Match {target.id}: {slot} changes from {previous.name} "
            f"to {decided.winner.name}"
        )

    graph = graph.with_match(replace(target, **{slot: decided.winner}))
    logger.debug(
        f"Advanced {decided.winner.name} from {decided.id} to {target.id}.{slot}"
    )

    return AdvancementResult(
        status=STATUS_OK,
        matches=graph.to_list(),
        match_id=decided.id,
        winner=decided.winner,
        target_id=target.id,
        slot=slot,
    )


def advance(
    matches: Sequence[Match],
    match_id: str,
    winner: Optional[Participant],
) -> AdvancementResult:
    """Record ``winner`` on a match and advance them.

    An unknown ``match_id`` leaves the snapshot unchanged. A missing or
    unknown downstream match records the winner without advancing it.
    Passing ``None`` as the winner clears the decision and advances nothing.
    Nothing here raises.
    """
    graph = MatchGraph(matches)
    match = graph.get(match_id)
    if match is None:
        logger.warning(f"Cannot decide unknown match {match_id}")
        return AdvancementResult(
            status=STATUS_NOT_FOUND, matches=list(matches), match_id=match_id
        )

    decided = replace(match, winner=winner)
    graph = graph.with_match(decided)

    if winner is None:
        return AdvancementResult(
            status=STATUS_UNDECIDED, matches=graph.to_list(), match_id=match_id
        )

    return _propagate(graph, decided)


def advance_with_scores(
    matches: Sequence[Match], match_id: str, score1: int, score2: int
) -> AdvancementResult:
    """Record scores on a match, derive the winner and advance them.

    Score entry needs both slots filled; otherwise the snapshot is returned
    unchanged. A tie stores the scores, leaves the match without a winner and
    advances nothing.
    """
    graph = MatchGraph(matches)
    match = graph.get(match_id)
    if match is None:
        logger.warning(f"Cannot score unknown match {match_id}")
        return AdvancementResult(
            status=STATUS_NOT_FOUND, matches=list(matches), match_id=match_id
        )

    if not match.is_ready:
        logger.warning(f"Cannot score match {match_id} before both slots are filled")
        return AdvancementResult(
            status=STATUS_INCOMPLETE, matches=list(matches), match_id=match_id
        )

    winner = determine_winner(match, score1, score2)
    decided = replace(match, score1=score1, score2=score2, winner=winner)
    graph = graph.with_match(decided)

    if winner is None:
        logger.info(f"Match {match_id} tied {score1}-{score2}, no winner")
        return AdvancementResult(
            status=STATUS_UNDECIDED, matches=graph.to_list(), match_id=match_id
        )

    return _propagate(graph, decided)


def decide_match(
    matches: Sequence[Match], match_id: str, winner: Optional[Participant]
) -> List[Match]:
    """Select a winner explicitly and return the updated snapshot."""
    return advance(matches, match_id, winner).matches


def record_score(
    matches: Sequence[Match], match_id: str, score1: int, score2: int
) -> List[Match]:
    """Record scores, derive the winner and return the updated snapshot."""
    return advance_with_scores(matches, match_id, score1, score2).matches


def get_champion(matches: Sequence[Match]) -> Optional[Participant]:
    """Winner of the final, or None while it is undecided."""
    final = MatchGraph(matches).final()
    return final.winner if final is not None else None
