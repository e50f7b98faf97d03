from bracketforge.cli import Shell, create_parser, main
from bracketforge.controllers.tournament_manager import TournamentManager


def _admin_shell():
    return Shell(TournamentManager(is_admin=True))


def test_bracket_command_prints_bracket(capsys):
    assert main(["bracket", "--participants", "4"]) == 0
    out = capsys.readouterr().out
    assert "Left Bracket" in out
    assert "Right Bracket" in out
    assert "== Final ==" in out
    assert "Participant 4 [p4]" in out


def test_league_command_with_names(capsys):
    assert main(["league", "--names", "Ann, Bo,Cy,Di"]) == 0
    out = capsys.readouterr().out
    assert "Week 3 of 3" in out
    assert "Ann [p1]" in out


def test_league_command_circle_method(capsys):
    assert main(["league", "--names", "A,B,C", "--method", "circle"]) == 0
    assert "Week 3 of 3" in capsys.readouterr().out


def test_parser_defaults():
    args = create_parser().parse_args(["league"])
    assert args.participants == 8
    assert args.method == "greedy"
    assert not args.admin


def test_shell_starts_without_admin(capsys):
    shell = Shell()
    assert shell.execute("new elimination 8")
    assert "Admin mode is required" in capsys.readouterr().out

    shell.execute("admin on")
    assert "Admin mode on" in capsys.readouterr().out
    shell.execute("new elimination 8")
    assert "Created elimination" in capsys.readouterr().out


def test_shell_bracket_session(capsys):
    shell = _admin_shell()
    shell.execute("new elimination 4 Spring Cup")
    assert "Created elimination 'Spring Cup'" in capsys.readouterr().out

    shell.execute("decide m1 p1")
    assert "Participant 1 advances to m5 (participant1)" in capsys.readouterr().out

    shell.execute("/score m2 1 3")
    assert "Participant 4 advances to m5 (participant2)" in capsys.readouterr().out

    shell.execute("show")
    out = capsys.readouterr().out
    assert "-> Participant 1" in out
    assert "(1-3)" in out


def test_shell_league_session(capsys):
    shell = _admin_shell()
    shell.execute("new league 4")
    capsys.readouterr()

    shell.execute("score m1 2 0")
    assert "Recorded m1: 2-0" in capsys.readouterr().out

    shell.execute("standings")
    out = capsys.readouterr().out
    assert "Pts" in out
    assert out.index("Participant 1") < out.index("Participant 2")


def test_shell_reports_errors_and_usage(capsys):
    shell = _admin_shell()
    shell.execute("decide m1 p1")
    assert "No active tournament" in capsys.readouterr().out

    shell.execute("new elimination 8")
    capsys.readouterr()
    shell.execute("decide m1")
    assert "Usage: decide" in capsys.readouterr().out
    shell.execute("score m1 one 2")
    assert "Usage: score" in capsys.readouterr().out
    shell.execute("decide m1 p7")
    assert "Error:" in capsys.readouterr().out

    shell.execute("frobnicate")
    assert "Unknown command" in capsys.readouterr().out


def test_shell_exit():
    shell = _admin_shell()
    assert shell.execute("") is True
    assert shell.execute("help") is True
    assert shell.execute("exit") is False
    assert shell.execute("/quit") is False
