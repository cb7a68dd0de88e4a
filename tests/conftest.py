import pytest


class FixedSource:
    """Random source that replays a fixed list of draws."""

    def __init__(self, draws):
        self.draws = list(draws)
        self.calls = 0

    def random(self) -> float:
        draw = self.draws[self.calls % len(self.draws)]
        self.calls += 1
        return draw


@pytest.fixture
def fixed_source():
    return FixedSource
