import pytest

from bracketforge.bracket.elimination import build_elimination_bracket
from bracketforge.models.participant import Participant, generate_participants


def make_roster(*names):
    return [
        Participant(id=name.lower(), name=name, seed=i + 1)
        for i, name in enumerate(names)
    ]


@pytest.fixture
def roster8():
    return generate_participants(8)


@pytest.fixture
def bracket8(roster8):
    return build_elimination_bracket(roster8)
