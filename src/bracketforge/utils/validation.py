"""Validation utilities for Bracket Forge.

This module provides reusable validation functions with consistent error handling.
The bracket builders and the advancement engine never validate their inputs;
callers that want strict behavior run these checks first.
"""

from typing import TYPE_CHECKING, Optional, Sequence

from bracketforge.constants import MIN_ROSTER_SIZE, TOURNAMENT_TYPES
from bracketforge.exceptions import (
    InvalidConfigurationException,
    InvalidResultException,
    InvalidRosterException,
)

if TYPE_CHECKING:
    from bracketforge.models.participant import Participant


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        sanitized_value: Cleaned/normalized value if valid
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        sanitized_value: Optional[object] = None,
    ):
        self.is_valid = is_valid
        self.error_message = error_message
        self.sanitized_value = sanitized_value

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return f"ValidationResult(VALID, {self.sanitized_value!r})"
        return f"ValidationResult(INVALID, {self.error_message!r})"


# ========== Roster Validation ==========


def validate_roster(
    participants: Sequence["Participant"], minimum: int = MIN_ROSTER_SIZE
) -> ValidationResult:
    """Validate a roster before building a bracket or schedule.

    Args:
        participants: Roster in seeding order
        minimum: Smallest acceptable roster size

    Returns:
        ValidationResult; on success ``sanitized_value`` is the roster as a list

    Example:
        >>> result = validate_roster(generate_participants(8))
        >>> if result:
        ...     matches = build_elimination_bracket(result.sanitized_value)
    """
    if len(participants) < minimum:
        return ValidationResult(
            is_valid=False,
            error_message=(
                f"At least {minimum} participants are required, "
                f"got {len(participants)}"
            ),
        )

    seen = set()
    for participant in participants:
        if participant.id in seen:
            return ValidationResult(
                is_valid=False,
                error_message=f"Duplicate participant id: {participant.id}",
            )
        seen.add(participant.id)

    return ValidationResult(is_valid=True, sanitized_value=list(participants))


def validate_roster_strict(
    participants: Sequence["Participant"], minimum: int = MIN_ROSTER_SIZE
) -> list:
    """Validate roster and return it as a list or raise exception.

    Raises:
        InvalidRosterException: If the roster is invalid
    """
    result = validate_roster(participants, minimum)
    if not result.is_valid:
        raise InvalidRosterException(result.error_message)
    return result.sanitized_value


# ========== Score Validation ==========


def validate_score(score) -> ValidationResult:
    """Validate a single score value.

    Accepts ints and integer-valued strings such as ``"3"``.

    Returns:
        ValidationResult with the score as an int
    """
    if isinstance(score, bool):
        return ValidationResult(
            is_valid=False, error_message=f"Invalid score: {score!r}"
        )

    try:
        value = int(str(score).strip())
    except (TypeError, ValueError):
        return ValidationResult(
            is_valid=False, error_message=f"Score must be a whole number: {score!r}"
        )

    if value < 0:
        return ValidationResult(
            is_valid=False, error_message=f"Score cannot be negative: {value}"
        )

    return ValidationResult(is_valid=True, sanitized_value=value)


def validate_score_strict(score) -> int:
    """Validate score and return it as an int or raise exception.

    Raises:
        InvalidResultException: If the score is invalid
    """
    result = validate_score(score)
    if not result.is_valid:
        raise InvalidResultException(result.error_message)
    return result.sanitized_value


# ========== Name Validation ==========


def validate_name(name: Optional[str], max_length: int = 100) -> ValidationResult:
    """Validate a tournament or participant name.

    Returns:
        ValidationResult with whitespace-collapsed name
    """
    if not name or not name.strip():
        return ValidationResult(is_valid=False, error_message="Name is required")

    cleaned = " ".join(name.split())
    if len(cleaned) > max_length:
        return ValidationResult(
            is_valid=False,
            error_message=f"Name is too long ({len(cleaned)} > {max_length})",
        )

    return ValidationResult(is_valid=True, sanitized_value=cleaned)


def validate_tournament_type(tournament_type: str) -> None:
    """Raise if ``tournament_type`` is not a known competition format.

    Raises:
        InvalidConfigurationException: If the type is unknown
    """
    if tournament_type not in TOURNAMENT_TYPES:
        raise InvalidConfigurationException(
            f"Unknown tournament type '{tournament_type}', "
            f"expected one of {', '.join(TOURNAMENT_TYPES)}"
        )
