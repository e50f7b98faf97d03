from bracketforge.models.match import Match
from bracketforge.models.participant import (
    Participant,
    generate_participants,
    make_bye,
)
from bracketforge.models.standing import LeagueStanding
from bracketforge.models.tournament import Tournament, TournamentConfig

__all__ = [
    "Participant",
    "Match",
    "Tournament",
    "TournamentConfig",
    "LeagueStanding",
    "generate_participants",
    "make_bye",
]
