"""Exceptions for use in Bracket Forge"""

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


# ========== Base Application Exception ==========


class BracketForgeException(Exception):
    """Base exception for all Bracket Forge errors.

    The engine itself never raises; these are used by the validation layer
    and the tournament coordinator so callers can catch everything
    application-specific with a single except clause.
    """

    pass


# ========== Roster Exceptions ==========


class RosterException(BracketForgeException):
    """Base exception for roster-related errors."""

    pass


class InvalidRosterException(RosterException):
    """Raised when a roster is too small or contains duplicate ids."""

    pass


# ========== Match Exceptions ==========


class MatchException(BracketForgeException):
    """Base exception for match-related errors."""

    pass


class MatchNotFoundException(MatchException):
    """Raised when a requested match does not exist."""

    pass


class ParticipantNotInMatchException(MatchException):
    """Raised when a winner is chosen who is not playing in the match."""

    pass


# ========== Result Exceptions ==========


class ResultException(BracketForgeException):
    """Base exception for result recording errors."""

    pass


class InvalidResultException(ResultException):
    """Raised when a score is invalid (e.g., negative)."""

    pass


# ========== Tournament Exceptions ==========


class TournamentException(BracketForgeException):
    """Base exception for tournament-related errors."""

    pass


class TournamentNotFoundException(TournamentException):
    """Raised when a requested tournament does not exist."""

    pass


class TournamentTypeException(TournamentException):
    """Raised when an operation does not apply to the tournament's format."""

    pass


class NoActiveTournamentException(TournamentException):
    """Raised when an operation needs an active tournament and none is set."""

    pass


# ========== Permission Exceptions ==========


class PermissionDeniedException(BracketForgeException):
    """Raised when a mutation is attempted without the admin capability."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(BracketForgeException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid."""

    pass
