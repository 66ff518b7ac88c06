import pytest

from GameController import InputExhausted


class ScriptedKeys:
    """Feeds a fixed sequence of keys, then behaves like a closed stream."""

    def __init__(self, keys):
        self.keys = list(keys)
        self.consumed = 0

    def __call__(self):
        if self.consumed >= len(self.keys):
            raise InputExhausted("No more scripted keys.")
        key = self.keys[self.consumed]
        self.consumed += 1
        return key


class OutputCollector:
    def __init__(self):
        self.chunks = []

    def __call__(self, text):
        self.chunks.append(text)

    @property
    def text(self):
        return "".join(self.chunks)

    def frames(self):
        """Returns the grid text of every rendered frame, in order."""
        frames = []
        for i, chunk in enumerate(self.chunks):
            if chunk.startswith("Generation ") and chunk.endswith(":\n"):
                frames.append(self.chunks[i + 1].rstrip("\n"))
        return frames


@pytest.fixture
def scripted_keys():
    return ScriptedKeys


@pytest.fixture
def output():
    return OutputCollector()
