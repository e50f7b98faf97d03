"""Command-line front end for Bracket Forge.

Runs one-shot commands (``bracket``, ``league``) or an interactive shell
with command completion for creating tournaments and entering results.
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

import argparse
import sys
from typing import List, Optional, Sequence

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import NestedCompleter
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.styles import Style

from bracketforge.bracket.elimination import (
    build_elimination_bracket,
    count_rounds,
    get_round_name,
)
from bracketforge.bracket.match_graph import MatchGraph
from bracketforge.bracket.round_robin import (
    build_league_schedule,
    count_weeks,
    matches_for_week,
)
from bracketforge.constants import (
    DEFAULT_MIN_PARTICIPANTS,
    POSITION_LEFT,
    POSITION_RIGHT,
    SCHEDULE_METHODS,
    TYPE_ELIMINATION,
    TYPE_LEAGUE,
)
from bracketforge.controllers.advancement import AdvancementResult, get_champion
from bracketforge.controllers.tournament_manager import TournamentManager
from bracketforge.exceptions import BracketForgeException
from bracketforge.models.match import Match
from bracketforge.models.participant import Participant, generate_participants
from bracketforge.models.standing import LeagueStanding
from bracketforge.models.tournament import Tournament
from bracketforge.type_hints import ScoreMap
from bracketforge.utils import set_verbosity, setup_logger

logger = setup_logger(__name__)


# ANSI color codes for terminal output
class Colors:
    HEADER = "\033[95m"
    OKBLUE = "\033[94m"
    OKGREEN = "\033[92m"
    WARNING = "\033[93m"
    FAIL = "\033[91m"
    ENDC = "\033[0m"
    BOLD = "\033[1m"


# Command definitions with their usage
COMMANDS = {
    "new": {
        "usage": "new <elimination|league> <participants> [name...]",
        "description": "Create a tournament with a generated roster",
    },
    "list": {"usage": "list", "description": "List tournaments"},
    "use": {"usage": "use <tournament-id>", "description": "Switch tournament"},
    "delete": {"usage": "delete <tournament-id>", "description": "Delete tournament"},
    "show": {"usage": "show [week]", "description": "Show bracket or league week"},
    "decide": {
        "usage": "decide <match-id> <participant-id>",
        "description": "Pick the winner of an elimination match",
    },
    "score": {
        "usage": "score <match-id> <score1> <score2>",
        "description": "Enter a match score",
    },
    "standings": {"usage": "standings", "description": "Show the league table"},
    "admin": {"usage": "admin <on|off>", "description": "Toggle admin mode"},
    "help": {"usage": "help", "description": "Show this list"},
    "exit": {"usage": "exit", "description": "Leave the shell"},
}


# ========== Rendering ==========


def format_participant(participant: Optional[Participant]) -> str:
    if participant is None:
        return "TBD"
    return f"{participant.name} [{participant.id}]"


def format_match(match: Match) -> str:
    line = (
        f"{match.id:>4}  {format_participant(match.participant1)}"
        f"  vs  {format_participant(match.participant2)}"
    )
    if match.score1 is not None and match.score2 is not None:
        line += f"  ({match.score1}-{match.score2})"
    if match.winner is not None:
        line += f"  -> {match.winner.name}"
    return line


def render_bracket(matches: Sequence[Match]) -> str:
    """Render an elimination bracket as text, one block per round and side."""
    graph = MatchGraph(matches)
    total_rounds = count_rounds(matches)
    lines: List[str] = []

    sides = ((POSITION_LEFT, "Left Bracket"), (POSITION_RIGHT, "Right Bracket"))
    for side, title in sides:
        lines.append(f"== {title} ==")
        for round_number in range(1, total_rounds):
            round_matches = graph.in_round(round_number, side)
            if not round_matches:
                continue
            lines.append(f"  {get_round_name(round_number, total_rounds)}")
            lines.extend(f"    {format_match(m)}" for m in round_matches)

    final = graph.final()
    if final is not None:
        lines.append("== Final ==")
        lines.append(f"    {format_match(final)}")
        champion = get_champion(matches)
        if champion is not None:
            lines.append(f"Champion: {champion.name}")

    return "\n".join(lines)


def render_week(
    matches: Sequence[Match], week: int, scores: Optional[ScoreMap] = None
) -> str:
    scores = scores or {}
    total = count_weeks(matches)
    lines = [f"== Week {week} of {total} =="]
    for match in matches_for_week(matches, week):
        line = format_match(match)
        if match.id in scores:
            score1, score2 = scores[match.id]
            line += f"  ({score1}-{score2})"
        lines.append(f"  {line}")
    return "\n".join(lines)


def render_schedule(matches: Sequence[Match]) -> str:
    return "\n".join(
        render_week(matches, week) for week in range(1, count_weeks(matches) + 1)
    )


def render_standings(standings: Sequence[LeagueStanding]) -> str:
    header = (
        f"{'#':>3}  {'Participant':<20} {'P':>3} {'W':>3} {'D':>3} {'L':>3}"
        f" {'GF':>4} {'GA':>4} {'GD':>4} {'Pts':>4}"
    )
    lines = [header, "-" * len(header)]
    for position, row in enumerate(standings, start=1):
        lines.append(
            f"{position:>3}  {row.participant.name:<20} {row.played:>3} {row.won:>3}"
            f" {row.drawn:>3} {row.lost:>3} {row.goals_for:>4} {row.goals_against:>4}"
            f" {row.goal_difference:>4} {row.points:>4}"
        )
    return "\n".join(lines)


def render_tournament(tournament: Tournament) -> str:
    if tournament.is_elimination:
        return render_bracket(tournament.matches)
    return render_week(tournament.matches, 1, tournament.scores)


# ========== Interactive Shell ==========


class Shell:
    """Line-oriented command interpreter over a ``TournamentManager``.

    ``execute`` handles one input line and returns False when the shell
    should stop, so the loop can be driven without a terminal.
    """

    def __init__(self, manager: Optional[TournamentManager] = None) -> None:
        self.manager = manager or TournamentManager()

    def execute(self, line: str) -> bool:
        parts = line.strip().split()
        if not parts:
            return True

        command = parts[0].lstrip("/").lower()
        args = parts[1:]

        if command in ("exit", "quit", "q"):
            print(f"\n{Colors.OKGREEN}Goodbye!{Colors.ENDC}\n")
            return False

        handler = getattr(self, f"do_{command}", None)
        if handler is None:
            print(f"{Colors.FAIL}Unknown command: {command}{Colors.ENDC}")
            print(f"Type {Colors.BOLD}help{Colors.ENDC} to see available commands")
            return True

        try:
            handler(args)
        except BracketForgeException as e:
            print(f"{Colors.FAIL}Error: {e}{Colors.ENDC}")
        except (ValueError, IndexError):
            print(f"{Colors.WARNING}Usage: {COMMANDS[command]['usage']}{Colors.ENDC}")
        return True

    def do_help(self, args: List[str]) -> None:
        print(f"\n{Colors.BOLD}Available commands:{Colors.ENDC}")
        for entry in COMMANDS.values():
            print(f"  {entry['usage']:<45} {entry['description']}")
        print()

    def do_new(self, args: List[str]) -> None:
        tournament_type = args[0]
        count = int(args[1])
        name = " ".join(args[2:]) or f"{tournament_type.title()} {count}"
        tournament = self.manager.quick_create(name, tournament_type, count)
        print(
            f"{Colors.OKGREEN}Created {tournament.type} '{tournament.name}' "
            f"({tournament.id}) with {len(tournament.participants)} participants"
            f"{Colors.ENDC}"
        )
        print(render_tournament(tournament))

    def do_list(self, args: List[str]) -> None:
        if not self.manager.tournaments:
            print("No tournaments yet")
            return
        active = self.manager.active
        for tournament in self.manager.tournaments:
            marker = "*" if active is not None and active.id == tournament.id else " "
            print(
                f" {marker} {tournament.id:<6} {tournament.type:<12} {tournament.name}"
                f"  ({tournament.created_at:%Y-%m-%d %H:%M})"
            )

    def do_use(self, args: List[str]) -> None:
        tournament = self.manager.set_active(args[0])
        print(f"Now using '{tournament.name}'")

    def do_delete(self, args: List[str]) -> None:
        self.manager.delete_tournament(args[0])
        print(f"Deleted {args[0]}")

    def do_show(self, args: List[str]) -> None:
        tournament = self.manager.active
        if tournament is None:
            print("No active tournament")
            return
        if tournament.is_league:
            week = int(args[0]) if args else 1
            print(render_week(tournament.matches, week, tournament.scores))
        else:
            print(render_bracket(tournament.matches))

    def do_decide(self, args: List[str]) -> None:
        result = self.manager.decide_match(args[0], args[1])
        self._report(result)

    def do_score(self, args: List[str]) -> None:
        match_id, score1, score2 = args[0], int(args[1]), int(args[2])
        tournament = self.manager.active
        if tournament is not None and tournament.is_league:
            self.manager.record_league_score(match_id, score1, score2)
            print(f"Recorded {match_id}: {score1}-{score2}")
            return
        self._report(self.manager.update_score(match_id, score1, score2))

    def do_standings(self, args: List[str]) -> None:
        print(render_standings(self.manager.standings()))

    def do_admin(self, args: List[str]) -> None:
        if args and args[0] in ("on", "off"):
            self.manager.is_admin = args[0] == "on"
        state = "on" if self.manager.is_admin else "off"
        print(f"Admin mode {state}")

    def _report(self, result: AdvancementResult) -> None:
        if result:
            print(
                f"{Colors.OKGREEN}{result.winner.name} advances to "
                f"{result.target_id} ({result.slot}){Colors.ENDC}"
            )
        elif result.winner is not None:
            print(f"{result.winner.name} wins {result.match_id}")
        else:
            print(f"{Colors.WARNING}{result.match_id}: {result.status}{Colors.ENDC}")


def create_completer() -> NestedCompleter:
    """Build a completer offering every command, with and without '/'."""
    options = {}
    for command in COMMANDS:
        nested = None
        if command == "new":
            nested = {TYPE_ELIMINATION: None, TYPE_LEAGUE: None}
        elif command == "admin":
            nested = {"on": None, "off": None}
        options[command] = nested
        options[f"/{command}"] = nested
    return NestedCompleter.from_nested_dict(options)


def run_interactive_mode(admin: bool = False) -> int:
    """Run the interactive shell until the user exits."""
    shell = Shell(TournamentManager(is_admin=admin))
    style = Style.from_dict({"prompt": "#00aa00 bold"})
    session = PromptSession(
        completer=create_completer(),
        history=InMemoryHistory(),
        style=style,
    )

    print(f"{Colors.HEADER}{Colors.BOLD}Bracket Forge{Colors.ENDC}")
    print(f"Type {Colors.BOLD}help{Colors.ENDC} to see available commands\n")

    while True:
        try:
            line = session.prompt("bracketforge> ")
        except KeyboardInterrupt:
            continue
        except EOFError:
            break
        if not shell.execute(line):
            break
    return 0


# ========== Standard Mode ==========


def _roster_from_args(args: argparse.Namespace) -> List[Participant]:
    if args.names:
        names = [name.strip() for name in args.names.split(",") if name.strip()]
        return [
            Participant(id=f"p{i + 1}", name=name, seed=i + 1)
            for i, name in enumerate(names)
        ]
    return generate_participants(args.participants, minimum=args.minimum)


def run_bracket_command(args: argparse.Namespace) -> int:
    matches = build_elimination_bracket(_roster_from_args(args))
    print(render_bracket(matches))
    return 0


def run_league_command(args: argparse.Namespace) -> int:
    matches = build_league_schedule(_roster_from_args(args), args.method)
    print(render_schedule(matches))
    return 0


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bracketforge",
        description="Build elimination brackets and round-robin leagues",
    )
    parser.add_argument(
        "-i", "--interactive", action="store_true", help="Start the interactive shell"
    )
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    parser.add_argument(
        "--admin", action="store_true", help="Start the shell in admin mode"
    )

    subparsers = parser.add_subparsers(dest="command")

    def add_roster_arguments(sub: argparse.ArgumentParser) -> None:
        sub.add_argument(
            "--participants",
            type=int,
            default=DEFAULT_MIN_PARTICIPANTS,
            help=f"Generated roster size (default: {DEFAULT_MIN_PARTICIPANTS})",
        )
        sub.add_argument(
            "--minimum",
            type=int,
            default=1,
            help="Smallest generated roster (default: 1)",
        )
        sub.add_argument("--names", help="Comma separated names, in seeding order")

    bracket_parser = subparsers.add_parser(
        "bracket", help="Print an elimination bracket"
    )
    add_roster_arguments(bracket_parser)
    bracket_parser.set_defaults(func=run_bracket_command)

    league_parser = subparsers.add_parser("league", help="Print a league schedule")
    add_roster_arguments(league_parser)
    league_parser.add_argument(
        "--method", choices=list(SCHEDULE_METHODS), default=SCHEDULE_METHODS[0]
    )
    league_parser.set_defaults(func=run_league_command)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the bracketforge command."""
    parser = create_parser()
    args = parser.parse_args(argv)
    set_verbosity(args.verbose)

    try:
        if args.interactive or args.command is None:
            return run_interactive_mode(args.admin)
        return args.func(args)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except BracketForgeException as e:
        print(f"{Colors.FAIL}Error: {e}{Colors.ENDC}")
        return 1
    except Exception as e:
        logger.error("Command failed: %s", e, exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
