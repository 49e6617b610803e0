import json
from pathlib import Path

import pytest

from config import DashboardConfig


class Workspace:
    """A throwaway agent workspace under tmp_path."""

    def __init__(self, root: Path):
        self.root = root
        self.config = DashboardConfig(str(root))

    def write_json(self, rel: str, doc) -> Path:
        p = self.root / rel
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(doc), encoding="utf-8")
        return p

    def write_text(self, rel: str, text: str) -> Path:
        p = self.root / rel
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(text, encoding="utf-8")
        return p

    def write_bytes(self, rel: str, data: bytes) -> Path:
        p = self.root / rel
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_bytes(data)
        return p

    def reward(self, doc):  return self.write_json("memory/reward-state.json", doc)
    def memory(self, doc):  return self.write_json("memory/index.json", doc)
    def emotion(self, doc): return self.write_json("memory/emotional-state.json", doc)

    @property
    def output(self) -> Path:
        return self.root / "brain-dashboard.html"


@pytest.fixture
def ws(tmp_path):
    return Workspace(tmp_path)


def _embedded_state(html: str) -> dict:
    start = html.index("const state = ") + len("const state = ")
    end = html.index(";\n", start)
    return json.loads(html[start:end])


@pytest.fixture
def embedded_state():
    """Pull the `const state = {...};` object back out of a rendered page."""
    return _embedded_state
