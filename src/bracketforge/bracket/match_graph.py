"""Id-keyed arena over a match collection.

Matches point forward with ``next_match_id`` strings, never object
references. ``MatchGraph`` indexes a snapshot by id so lookups and feeder
queries do not need repeated linear scans, and produces new snapshots when a
match is replaced.
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

from collections import Counter
from typing import Dict, Iterable, Iterator, List, Optional

from bracketforge.constants import BRACKET_POSITIONS, POSITION_FINAL
from bracketforge.models.match import Match
from bracketforge.utils.validation import ValidationResult


class MatchGraph:
    """Read-mostly view of a match snapshot keyed by match id.

    Iteration follows the order of the original collection, and
    ``with_match`` keeps a replaced match at its original position.
    """

    def __init__(self, matches: Iterable[Match]) -> None:
        self._matches: Dict[str, Match] = {}
        for match in matches:
            # first occurrence wins, as with a linear find-by-id
            self._matches.setdefault(match.id, match)

    def __len__(self) -> int:
        return len(self._matches)

    def __iter__(self) -> Iterator[Match]:
        return iter(self._matches.values())

    def __contains__(self, match_id: object) -> bool:
        return match_id in self._matches

    def get(self, match_id: Optional[str]) -> Optional[Match]:
        if match_id is None:
            return None
        return self._matches.get(match_id)

    def feeders_of(
        self,
        target_id: str,
        round_number: Optional[int] = None,
        bracket_position: Optional[str] = None,
    ) -> List[Match]:
        """Matches whose winner advances into ``target_id``.

        Optionally restricted to one round and one side. The result is sorted
        by id using plain string comparison, so ``"m10"`` sorts before
        ``"m9"``.
        """
        feeders = [
            match
            for match in self._matches.values()
            if match.next_match_id == target_id
            and (round_number is None or match.round == round_number)
            and (bracket_position is None or match.bracket_position == bracket_position)
        ]
        feeders.sort(key=lambda m: m.id)
        return feeders

    def with_match(self, match: Match) -> "MatchGraph":
        """Return a new graph where ``match`` replaces the entry with its id."""
        updated = MatchGraph(())
        updated._matches = dict(self._matches)
        updated._matches[match.id] = match
        return updated

    def final(self) -> Optional[Match]:
        for match in self._matches.values():
            if match.bracket_position == POSITION_FINAL:
                return match
        return None

    def rounds(self) -> int:
        """Highest round number in the graph, or 0 when empty."""
        return max((m.round for m in self._matches.values()), default=0)

    def in_round(
        self, round_number: int, bracket_position: Optional[str] = None
    ) -> List[Match]:
        return [
            m
            for m in self._matches.values()
            if m.round == round_number
            and (bracket_position is None or m.bracket_position == bracket_position)
        ]

    def to_list(self) -> List[Match]:
        return list(self._matches.values())


def validate_bracket(matches: List[Match]) -> ValidationResult:
    """Check the structural invariants of an elimination bracket.

    Checks id uniqueness, known bracket positions, a single final without a
    forward link, forward links that land exactly one round later, fan-in of
    at most two, and that feeders sharing a non-final target come from the
    same round and side.

    Returns:
        ValidationResult describing the first violation, or valid with the
        match count as ``sanitized_value``
    """
    id_counts = Counter(m.id for m in matches)
    duplicates = sorted(match_id for match_id, n in id_counts.items() if n > 1)
    if duplicates:
        return ValidationResult(
            is_valid=False, error_message=f"Duplicate match ids: {duplicates}"
        )

    unknown = sorted(
        m.id for m in matches if m.bracket_position not in BRACKET_POSITIONS
    )
    if unknown:
        return ValidationResult(
            is_valid=False, error_message=f"Unknown bracket position in: {unknown}"
        )

    graph = MatchGraph(matches)
    finals = [m for m in matches if m.bracket_position == POSITION_FINAL]
    if len(finals) != 1:
        return ValidationResult(
            is_valid=False,
            error_message=f"Expected exactly one final, found {len(finals)}",
        )
    final = finals[0]
    if final.next_match_id is not None:
        return ValidationResult(
            is_valid=False,
            error_message=f"Final {final.id} links forward to {final.next_match_id}",
        )
    if final.round != graph.rounds():
        return ValidationResult(
            is_valid=False,
            error_message=f"Final {final.id} is not in the last round",
        )

    for match in matches:
        if match.is_final:
            continue
        target = graph.get(match.next_match_id)
        if target is None:
            return ValidationResult(
                is_valid=False,
                error_message=(
                    f"Match {match.id} links to missing match {match.next_match_id}"
                ),
            )
        if target.round != match.round + 1:
            return ValidationResult(
                is_valid=False,
                error_message=(
                    f"Match {match.id} (round {match.round}) feeds {target.id} "
                    f"(round {target.round})"
                ),
            )

    for target in matches:
        feeders = graph.feeders_of(target.id)
        if len(feeders) > 2:
            return ValidationResult(
                is_valid=False,
                error_message=f"Match {target.id} has {len(feeders)} feeders",
            )
        if len(feeders) == 2 and not target.is_final:
            first, second = feeders
            if (first.round, first.bracket_position) != (
                second.round,
                second.bracket_position,
            ):
                return ValidationResult(
                    is_valid=False,
                    error_message=(
                        f"Feeders of {target.id} come from different rounds or sides"
                    ),
                )

    return ValidationResult(is_valid=True, sanitized_value=len(matches))
