# scripts/config.py
# Workspace layout and defaults for the brain dashboard.

from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

WORKSPACE_UNDER_HOME = os.path.join(".openclaw", "workspace")

REWARD_FILE   = os.path.join("memory", "reward-state.json")
MEMORY_FILE   = os.path.join("memory", "index.json")
EMOTION_FILE  = os.path.join("memory", "emotional-state.json")
IDENTITY_FILE = "IDENTITY.md"
OUTPUT_FILE   = "brain-dashboard.html"
AVATAR_CANDIDATES = ("avatar.png", "avatar.jpg")

DEFAULT_AGENT_NAME = "Agent"
AVATAR_PLACEHOLDER = "⭐"

DEFAULT_DRIVE = 0.5
TOP_N = 5
CORE_IMPORTANCE = 0.7
SUMMARY_CHARS = 80

# Emotional dimensions and their fallbacks when a value is absent
DIMENSION_DEFAULTS = {
    "valence": 0,
    "arousal": 0.3,
    "connection": 0.4,
    "curiosity": 0.5,
    "energy": 0.5,
    "trust": 0.5,
    "anticipation": 0,
}


@dataclass(frozen=True)
class DashboardConfig:
    workspace_dir: str
    home_dir: Optional[str] = None   # for ~/ avatar paths; None means the process home

    def _path(self, rel: str) -> str:
        return os.path.join(self.workspace_dir, rel)

    @property
    def reward_file(self) -> str:   return self._path(REWARD_FILE)
    @property
    def memory_file(self) -> str:   return self._path(MEMORY_FILE)
    @property
    def emotion_file(self) -> str:  return self._path(EMOTION_FILE)
    @property
    def identity_file(self) -> str: return self._path(IDENTITY_FILE)
    @property
    def output_file(self) -> str:   return self._path(OUTPUT_FILE)

    @property
    def avatar_candidates(self) -> Tuple[str, ...]:
        return tuple(self._path(name) for name in AVATAR_CANDIDATES)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "DashboardConfig":
        """WORKSPACE if set, else ~/.openclaw/workspace (HOME taken from the same mapping)."""
        env = os.environ if environ is None else environ
        home = env.get("HOME") or os.path.expanduser("~")
        ws = env.get("WORKSPACE")
        if ws:
            return cls(ws, home)
        return cls(os.path.join(home, WORKSPACE_UNDER_HOME), home)
