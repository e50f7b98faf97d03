"""Single elimination bracket construction.

The padded roster is split into a left and a right half. Each half plays
its own sub-bracket and the two half winners meet in the final, so a
participant can never cross sides before the final.

Seeding is positional: the roster order decides the first-round slots and
no strength balancing is applied.
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

from typing import Any, Dict, List, Sequence

from bracketforge.constants import (
    MATCH_ID_PREFIX,
    POSITION_FINAL,
    POSITION_LEFT,
    POSITION_RIGHT,
    ROUND_NAME_FINAL,
    ROUND_NAME_QUARTER_FINAL,
    ROUND_NAME_SEMI_FINAL,
)
from bracketforge.models.match import Match
from bracketforge.models.participant import Participant, make_bye
from bracketforge.utils import setup_logger

logger = setup_logger(__name__)


def next_power_of_two(n: int) -> int:
    """Smallest power of two that holds ``n`` participants, never below 2."""
    size = 2
    while size < n:
        size *= 2
    return size


def pad_roster(participants: Sequence[Participant]) -> List[Participant]:
    """Append BYE placeholders until the roster fills a power-of-two draw.

    BYE ids already used by a roster participant are skipped, so every id in
    the padded roster is distinct.
    """
    padded = list(participants)
    byes_needed = next_power_of_two(len(padded)) - len(padded)
    taken = {p.id for p in padded}
    index = 0
    while byes_needed > 0:
        bye = make_bye(index)
        index += 1
        if bye.id in taken:
            continue
        padded.append(bye)
        byes_needed -= 1
    return padded


def get_round_name(round_number: int, total_rounds: int) -> str:
    """Label a round the way a bracket is usually read.

    Args:
        round_number: 1-based round
        total_rounds: Round number of the final

    Returns:
        "Final", "Semi Final", "Quarter Final" or "Round N"
    """
    if round_number == total_rounds:
        return ROUND_NAME_FINAL
    if round_number == total_rounds - 1:
        return ROUND_NAME_SEMI_FINAL
    if round_number == total_rounds - 2:
        return ROUND_NAME_QUARTER_FINAL
    return f"Round {round_number}"


def count_rounds(matches: Sequence[Match]) -> int:
    """Highest round number in a bracket, 0 when empty."""
    return max((m.round for m in matches), default=0)


def _build_skeleton(rounds: int) -> List[Dict[str, Any]]:
    """Create the unlinked match records, left side before right each round."""
    skeleton: List[Dict[str, Any]] = []
    match_number = 1

    for round_number in range(1, rounds + 1):
        if round_number == rounds:
            skeleton.append(
                {
                    "id": f"{MATCH_ID_PREFIX}{match_number}",
                    "round": round_number,
                    "bracket_position": POSITION_FINAL,
                    "next_match_id": None,
                }
            )
            match_number += 1
            continue

        matches_per_side = 2 ** (rounds - round_number) // 2
        for side in (POSITION_LEFT, POSITION_RIGHT):
            for _ in range(matches_per_side):
                skeleton.append(
                    {
                        "id": f"{MATCH_ID_PREFIX}{match_number}",
                        "round": round_number,
                        "bracket_position": side,
                        "next_match_id": None,
                    }
                )
                match_number += 1

    return skeleton


def _link_rounds(skeleton: List[Dict[str, Any]], rounds: int) -> None:
    """Fill in ``next_match_id`` on every non-final record."""

    def select(round_number: int, side: str) -> List[Dict[str, Any]]:
        return [
            r
            for r in skeleton
            if r["round"] == round_number and r["bracket_position"] == side
        ]

    final = next(r for r in skeleton if r["bracket_position"] == POSITION_FINAL)

    for round_number in range(1, rounds):
        for side in (POSITION_LEFT, POSITION_RIGHT):
            current = select(round_number, side)
            following = select(round_number + 1, side)

            for index, record in enumerate(current):
                if index // 2 < len(following):
                    record["next_match_id"] = following[index // 2]["id"]

            # The last match on each side feeds the final. Left fills
            # participant1 of the final and right fills participant2.
            if round_number == rounds - 1 and current:
                current[-1]["next_match_id"] = final["id"]


def _seed_side(
    records: List[Dict[str, Any]], side_roster: List[Participant]
) -> None:
    for index, participant in enumerate(side_roster):
        match_index = index // 2
        if match_index >= len(records):
            break
        slot = "participant1" if index % 2 == 0 else "participant2"
        records[match_index][slot] = participant


def build_elimination_bracket(participants: Sequence[Participant]) -> List[Match]:
    """Build a fully linked single elimination bracket.

    The roster is padded with BYEs to a power of two ``P``. Match ids run
    ``m1..m(P-1)`` round by round, left side first. Every match starts with
    both scores at 0 and no winner. BYE matches are not resolved
    automatically.

    The roster is not validated here: callers that need a minimum size or
    unique ids run ``validate_roster`` first.

    Args:
        participants: Roster in seeding order

    Returns:
        List of matches ordered by id number, final last
    """
    padded = pad_roster(participants)
    bracket_size = len(padded)
    rounds = bracket_size.bit_length() - 1
    half = bracket_size // 2

    left_roster = padded[:half]
    right_roster = padded[half:]

    skeleton = _build_skeleton(rounds)
    _link_rounds(skeleton, rounds)

    if rounds == 1:
        # A two-slot draw is just the final: left seed vs right seed
        skeleton[0]["participant1"] = left_roster[0]
        skeleton[0]["participant2"] = right_roster[0]
    else:
        first_round = [r for r in skeleton if r["round"] == 1]
        _seed_side(
            [r for r in first_round if r["bracket_position"] == POSITION_LEFT],
            left_roster,
        )
        _seed_side(
            [r for r in first_round if r["bracket_position"] == POSITION_RIGHT],
            right_roster,
        )

    matches = [
        Match(
            id=record["id"],
            round=record["round"],
            bracket_position=record["bracket_position"],
            participant1=record.get("participant1"),
            participant2=record.get("participant2"),
            next_match_id=record["next_match_id"],
            score1=0,
            score2=0,
        )
        for record in skeleton
    ]

    logger.info(
        f"Built elimination bracket: {len(participants)} participants, "
        f"{bracket_size - len(participants)} byes, {rounds} rounds, "
        f"{len(matches)} matches"
    )
    return matches
