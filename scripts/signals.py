# scripts/signals.py
# Derive the three dashboard sections (hippocampus / amygdala / vta) from the raw documents.

from __future__ import annotations
from typing import Any, Dict, List, Optional

import pandas as pd

from config import CORE_IMPORTANCE, DEFAULT_DRIVE, DIMENSION_DEFAULTS, SUMMARY_CHARS, TOP_N
from scoring import UNKNOWN_MOOD, classify_mood, drive_percent

_REWARD_COLS  = ["type", "source", "intensity"]
_MEMORY_COLS  = ["id", "domain", "importance"]
_EMOTION_COLS = ["label", "intensity", "trigger"]

# Bar metadata for the Dimensions card: key, name, icon, min, max, fill
DIMENSION_BARS = [
    {"k": "valence",    "n": "Valence",    "i": "🎭", "min": -1, "max": 1, "c": "linear-gradient(90deg,#ef4444,#fbbf24,#10b981)"},
    {"k": "arousal",    "n": "Arousal",    "i": "⚡", "min": 0,  "max": 1, "c": "linear-gradient(90deg,#3b82f6,#f97316)"},
    {"k": "connection", "n": "Connection", "i": "💕", "min": 0,  "max": 1, "c": "#ec4899"},
    {"k": "curiosity",  "n": "Curiosity",  "i": "🔍", "min": 0,  "max": 1, "c": "#06b6d4"},
    {"k": "energy",     "n": "Energy",     "i": "🔋", "min": 0,  "max": 1, "c": "#eab308"},
    {"k": "trust",      "n": "Trust",      "i": "🤝", "min": 0,  "max": 1, "c": "#10b981"},
]


def _get(doc, key, default):
    """doc[key], falling back to default when the key is missing, null or false."""
    if not isinstance(doc, dict):
        return default
    v = doc.get(key)
    return default if v is None or v is False else v

def _project(rows, cols) -> List[Dict[str, Any]]:
    return [{c: (r.get(c) if isinstance(r, dict) else None) for c in cols} for r in rows]

def _last(rows, n=TOP_N) -> list:
    rows = rows if isinstance(rows, list) else []
    return rows[-n:] if n > 0 else []


def _importance(memories) -> pd.Series:
    raw = [m.get("importance") if isinstance(m, dict) else None for m in memories]
    return pd.to_numeric(pd.Series(raw, dtype="object"), errors="coerce").fillna(0.0).astype(float)

def summarize(content, n=SUMMARY_CHARS) -> str:
    # The ellipsis is always appended, even when nothing was cut.
    return (content if isinstance(content, str) else "")[:n] + "..."

def top_memories(memories, n=TOP_N) -> List[Dict[str, Any]]:
    """Top n memories by importance (descending, ties keep file order)."""
    if not memories or n <= 0:
        return []
    order = _importance(memories).sort_values(ascending=False, kind="mergesort").head(n).index
    out = []
    for i in order:
        m = memories[i] if isinstance(memories[i], dict) else {}
        rec = {c: m.get(c) for c in _MEMORY_COLS}
        rec["summary"] = summarize(m.get("content"))
        out.append(rec)
    return out

def core_count(memories) -> int:
    if not memories:
        return 0
    return int((_importance(memories) >= CORE_IMPORTANCE).sum())


def hippocampus_section(doc: Optional[dict]) -> Dict[str, Any]:
    if doc is None:
        return {"installed": False, "memoryCount": 0, "coreCount": 0, "topMemories": []}
    memories = _get(doc, "memories", [])
    memories = memories if isinstance(memories, list) else []
    return {
        "installed": True,
        "memoryCount": len(memories),
        "coreCount": core_count(memories),
        "topMemories": top_memories(memories),
    }

def amygdala_section(doc: Optional[dict]) -> Dict[str, Any]:
    if doc is None:
        return {"installed": False, "mood": UNKNOWN_MOOD}
    dims_raw = _get(doc, "dimensions", {})
    dims = {k: _get(dims_raw, k, d) for k, d in DIMENSION_DEFAULTS.items()}
    return {
        "installed": True,
        "dimensions": dims,
        "dimensionBars": DIMENSION_BARS,
        "recentEmotions": _project(_last(_get(doc, "recentEmotions", [])), _EMOTION_COLS),
        "mood": classify_mood(dims["valence"], dims["arousal"]),
    }

def vta_section(doc: dict) -> Dict[str, Any]:
    drive = _get(doc, "drive", DEFAULT_DRIVE)
    return {
        "drive": drive,
        "drivePercent": drive_percent(drive),
        "seeking": _get(doc, "seeking", []),
        "anticipating": _get(doc, "anticipating", []),
        "recentRewards": _project(_last(_get(doc, "recentRewards", [])), _REWARD_COLS),
    }


def build_state(hippocampus: Dict[str, Any], amygdala: Dict[str, Any], vta: Dict[str, Any]) -> Dict[str, Any]:
    """
    The data object embedded in the page. Memories go in ranked order; emotions
    and rewards go oldest-first and the page script reverses them.
    """
    if amygdala["installed"]:
        amy = {k: amygdala[k] for k in ("installed", "dimensions", "dimensionBars", "recentEmotions")}
    else:
        amy = {"installed": False}
    return {
        "hippocampus": {"installed": hippocampus["installed"], "topMemories": hippocampus["topMemories"]},
        "amygdala": amy,
        "vta": {k: vta[k] for k in ("drive", "seeking", "anticipating", "recentRewards")},
    }
