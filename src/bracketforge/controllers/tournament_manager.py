"""Tournament coordinator - owns the tournament list and serializes updates.

The engine functions are stateless. ``TournamentManager`` holds the state a
front end would otherwise keep globally (tournament list, active tournament,
admin flag), runs every read-modify-write cycle against the active
tournament, and swaps in the snapshot the engine returns.
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

from typing import List, Optional, Sequence, Union

from bracketforge.bracket.elimination import build_elimination_bracket
from bracketforge.bracket.round_robin import build_league_schedule
from bracketforge.constants import (
    DEFAULT_MIN_PARTICIPANTS,
    DEFAULT_SCHEDULE_METHOD,
    MIN_ROSTER_SIZE,
    TOURNAMENT_ID_PREFIX,
    TYPE_ELIMINATION,
    TYPE_LEAGUE,
)
from bracketforge.controllers.advancement import (
    AdvancementResult,
    advance,
    advance_with_scores,
    get_champion,
)
from bracketforge.controllers.standings import compute_standings, record_league_score
from bracketforge.exceptions import (
    MatchNotFoundException,
    NoActiveTournamentException,
    ParticipantNotInMatchException,
    PermissionDeniedException,
    TournamentNotFoundException,
    TournamentTypeException,
)
from bracketforge.models.match import Match
from bracketforge.models.participant import Participant, generate_participants
from bracketforge.models.standing import LeagueStanding
from bracketforge.models.tournament import Tournament, TournamentConfig
from bracketforge.utils import generate_id, setup_logger
from bracketforge.utils.validation import (
    validate_name,
    validate_roster_strict,
    validate_score_strict,
    validate_tournament_type,
)

logger = setup_logger(__name__)


class TournamentManager:
    """Coordinates tournament creation and result entry.

    This class is responsible for:
    - Creating tournaments with a validated roster
    - Tracking the active tournament
    - Guarding every mutation with the admin capability flag
    - Routing results to the advancement engine or the league score table

    Engine no-ops (unknown match, tie, unfilled slot) are not errors here
    either; the ``AdvancementResult`` returned by the elimination methods
    tells the caller what happened.
    """

    def __init__(self, is_admin: bool = False) -> None:
        self.is_admin = is_admin
        self._tournaments: List[Tournament] = []
        self._active_id: Optional[str] = None

    # ========== Properties ==========

    @property
    def tournaments(self) -> List[Tournament]:
        """All tournaments in creation order."""
        return list(self._tournaments)

    @property
    def active(self) -> Optional[Tournament]:
        """The tournament results are currently entered for."""
        if self._active_id is None:
            return None
        return self._find(self._active_id)

    # ========== Tournament Management ==========

    def create_tournament(
        self,
        config: TournamentConfig,
        participant_count: int = 0,
        participants: Optional[Sequence[Participant]] = None,
    ) -> Tournament:
        """Create a tournament and make it active.

        Args:
            config: Name, format and roster settings
            participant_count: Size of a generated roster, used when
                ``participants`` is not given (raised to
                ``config.min_participants``)
            participants: Explicit roster in seeding order

        Returns:
            The new tournament

        Raises:
            PermissionDeniedException: Without the admin flag
            InvalidConfigurationException: For an unknown format
            InvalidRosterException: For fewer than two or duplicate participants
        """
        self._require_admin("create a tournament")
        validate_tournament_type(config.type)
        name_result = validate_name(config.name)
        name = name_result.sanitized_value if name_result else "Untitled Tournament"

        if participants is None:
            participants = generate_participants(
                participant_count, config.min_participants
            )
        roster = validate_roster_strict(participants, MIN_ROSTER_SIZE)

        if config.type == TYPE_ELIMINATION:
            matches = build_elimination_bracket(roster)
        else:
            matches = build_league_schedule(roster, config.schedule_method)

        tournament = Tournament(
            id=generate_id(TOURNAMENT_ID_PREFIX),
            name=name,
            type=config.type,
            participants=roster,
            matches=matches,
        )
        self._tournaments.append(tournament)
        self._active_id = tournament.id

        logger.info(
            f"Created {config.type} tournament '{name}' ({tournament.id}) "
            f"with {len(roster)} participants"
        )
        return tournament

    def quick_create(
        self,
        name: str,
        tournament_type: str,
        participant_count: int,
        schedule_method: str = DEFAULT_SCHEDULE_METHOD,
    ) -> Tournament:
        """Create a tournament with a generated ``p1..pN`` roster."""
        config = TournamentConfig(
            name=name,
            type=tournament_type,
            min_participants=DEFAULT_MIN_PARTICIPANTS,
            schedule_method=schedule_method,
        )
        return self.create_tournament(config, participant_count=participant_count)

    def delete_tournament(self, tournament_id: str) -> None:
        """Remove a tournament; clears the active one if it was deleted.

        Raises:
            PermissionDeniedException: Without the admin flag
            TournamentNotFoundException: If no tournament has this id
        """
        self._require_admin("delete a tournament")
        tournament = self.get_tournament(tournament_id)
        self._tournaments = [t for t in self._tournaments if t.id != tournament.id]
        if self._active_id == tournament_id:
            self._active_id = None
        logger.info(f"Deleted tournament '{tournament.name}' ({tournament_id})")

    def get_tournament(self, tournament_id: str) -> Tournament:
        """Look up a tournament by id.

        Raises:
            TournamentNotFoundException: If no tournament has this id
        """
        tournament = self._find(tournament_id)
        if tournament is None:
            raise TournamentNotFoundException(f"No tournament with id {tournament_id}")
        return tournament

    def set_active(self, tournament_id: str) -> Tournament:
        tournament = self.get_tournament(tournament_id)
        self._active_id = tournament.id
        return tournament

    # ========== Elimination Results ==========

    def decide_match(self, match_id: str, winner_id: str) -> AdvancementResult:
        """Pick the winner of an elimination match by participant id.

        Raises:
            PermissionDeniedException: Without the admin flag
            NoActiveTournamentException: If no tournament is active
            TournamentTypeException: If the active tournament is a league
            MatchNotFoundException: If the match does not exist
            ParticipantNotInMatchException: If the winner is not in the match
        """
        self._require_admin("decide a match")
        tournament = self._require_active(TYPE_ELIMINATION)
        match = self._require_match(tournament, match_id)

        winner = next(
            (
                p
                for p in (match.participant1, match.participant2)
                if p is not None and p.id == winner_id
            ),
            None,
        )
        if winner is None:
            raise ParticipantNotInMatchException(
                f"{winner_id} is not playing in match {match_id}"
            )

        result = advance(tournament.matches, match_id, winner)
        tournament.matches = result.matches
        logger.info(f"Match {match_id} decided for {winner.name}: {result.status}")
        return result

    def update_score(
        self, match_id: str, score1: Union[int, str], score2: Union[int, str]
    ) -> AdvancementResult:
        """Enter elimination scores; the higher score wins and advances.

        Raises:
            PermissionDeniedException: Without the admin flag
            NoActiveTournamentException: If no tournament is active
            TournamentTypeException: If the active tournament is a league
            MatchNotFoundException: If the match does not exist
            InvalidResultException: For negative or non-numeric scores
        """
        self._require_admin("record a score")
        tournament = self._require_active(TYPE_ELIMINATION)
        self._require_match(tournament, match_id)
        first = validate_score_strict(score1)
        second = validate_score_strict(score2)

        result = advance_with_scores(tournament.matches, match_id, first, second)
        tournament.matches = result.matches
        logger.info(f"Match {match_id} scored {first}-{second}: {result.status}")
        return result

    def champion(self) -> Optional[Participant]:
        tournament = self._require_active(TYPE_ELIMINATION)
        return get_champion(tournament.matches)

    # ========== League Results ==========

    def record_league_score(
        self, match_id: str, score1: Union[int, str], score2: Union[int, str]
    ) -> None:
        """Store a league score in the active tournament's score table.

        Raises:
            PermissionDeniedException: Without the admin flag
            NoActiveTournamentException: If no tournament is active
            TournamentTypeException: If the active tournament is a bracket
            MatchNotFoundException: If the match does not exist
            InvalidResultException: For negative or non-numeric scores
        """
        self._require_admin("record a score")
        tournament = self._require_active(TYPE_LEAGUE)
        self._require_match(tournament, match_id)
        first = validate_score_strict(score1)
        second = validate_score_strict(score2)

        tournament.scores = record_league_score(
            tournament.scores, match_id, first, second
        )
        logger.info(f"League match {match_id} recorded {first}-{second}")

    def standings(self) -> List[LeagueStanding]:
        tournament = self._require_active(TYPE_LEAGUE)
        return compute_standings(
            tournament.participants, tournament.matches, tournament.scores
        )

    # ========== Helpers ==========

    def _find(self, tournament_id: str) -> Optional[Tournament]:
        for tournament in self._tournaments:
            if tournament.id == tournament_id:
                return tournament
        return None

    def _require_admin(self, action: str) -> None:
        if not self.is_admin:
            raise PermissionDeniedException(f"Admin mode is required to {action}")

    def _require_active(self, tournament_type: str) -> Tournament:
        tournament = self.active
        if tournament is None:
            raise NoActiveTournamentException("No active tournament")
        if tournament.type != tournament_type:
            raise TournamentTypeException(
                f"'{tournament.name}' is a {tournament.type} tournament, "
                f"this operation needs {tournament_type}"
            )
        return tournament

    @staticmethod
    def _require_match(tournament: Tournament, match_id: str) -> Match:
        match = tournament.get_match(match_id)
        if match is None:
            raise MatchNotFoundException(
                f"No match {match_id} in tournament '{tournament.name}'"
            )
        return match
