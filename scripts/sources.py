# scripts/sources.py
# Readers for the workspace inputs: reward/memory/emotion JSON, IDENTITY.md and the avatar image.

from __future__ import annotations
import base64
import json
import os
import re
from dataclasses import dataclass
from typing import Optional

from config import DEFAULT_AGENT_NAME, DashboardConfig

_NAME_RE   = re.compile(r"^(?:- )?\*\*Name:\*\*")
_AVATAR_RE = re.compile(r"^(?:- )?\*\*Avatar:\*\*")


@dataclass(frozen=True)
class Identity:
    name: str = DEFAULT_AGENT_NAME
    avatar_ref: str = ""


def read_json(path):
    # Invalid JSON is not handled here; the decode error surfaces to the caller.
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)

def load_optional_json(path):
    """Return the parsed document, or None when the file is absent."""
    if not os.path.isfile(path):
        return None
    return read_json(path)


def _label_value(line: str, label: str) -> str:
    # Everything after the last "<label>:**", minus backticks and CRs
    value = line.rsplit(f"{label}:**", 1)[-1]
    return value.replace("`", "").replace("\r", "").strip()

def parse_identity(text: str) -> Identity:
    """
    Pull the display name and avatar reference out of IDENTITY.md text.
    Recognised lines look like `**Name:** Nova` or `- **Avatar:** images/me.png`;
    the first match of each wins.
    """
    name = avatar = None
    for line in (text or "").splitlines():
        if name is None and _NAME_RE.match(line):
            name = _label_value(line, "Name")
        elif avatar is None and _AVATAR_RE.match(line):
            avatar = _label_value(line, "Avatar")
    return Identity(name=name or DEFAULT_AGENT_NAME, avatar_ref=avatar or "")

def load_identity(config: DashboardConfig) -> Identity:
    if not os.path.isfile(config.identity_file):
        return Identity()
    # Non-UTF-8 bytes become U+FFFD rather than aborting the run
    with open(config.identity_file, "r", encoding="utf-8", errors="replace") as f:
        return parse_identity(f.read())


def expand_avatar_ref(avatar_ref: str, config: DashboardConfig, home: Optional[str] = None) -> Optional[str]:
    """Absolute paths as is, ~/ against home (argument, then config.home_dir), anything else against the workspace."""
    if not avatar_ref:
        return None
    if os.path.isabs(avatar_ref):
        return avatar_ref
    if avatar_ref.startswith("~/"):
        base = home if home is not None else (config.home_dir or os.path.expanduser("~"))
        return os.path.join(base, avatar_ref[2:])
    return os.path.join(config.workspace_dir, avatar_ref)

def resolve_avatar_path(avatar_ref: str, config: DashboardConfig, home: Optional[str] = None) -> Optional[str]:
    """
    Resolve the avatar file with this priority:
    1) the IDENTITY.md reference, if that file exists
    2) Fallback: first existing avatar.png / avatar.jpg in the workspace
    """
    path = expand_avatar_ref(avatar_ref, config, home)
    if path and os.path.isfile(path):
        return path
    for candidate in config.avatar_candidates:
        if os.path.isfile(candidate):
            return candidate
    return None

def avatar_mime(path: str) -> str:
    return "image/jpeg" if path.lower().endswith((".jpg", ".jpeg")) else "image/png"

def avatar_data_uri(path: str) -> str:
    with open(path, "rb") as f:
        payload = base64.b64encode(f.read()).decode("ascii")
    return f"data:{avatar_mime(path)};base64,{payload}"
