# scripts/pipeline.py
import os
import sys
from dataclasses import dataclass
from typing import Optional

from config import AVATAR_PLACEHOLDER, DashboardConfig
from sources import (avatar_data_uri, expand_avatar_ref, load_identity,
                     load_optional_json, read_json, resolve_avatar_path)
from signals import amygdala_section, build_state, hippocampus_section, vta_section
from render import render_dashboard, write_dashboard

def _log(msg):
    # stdout carries only the final status line
    print(msg, file=sys.stderr)

@dataclass
class GenerateResult:
    html: Optional[str]
    exit_code: int
    message: str = ""

def build_context(config: DashboardConfig, reward: dict):
    memory = load_optional_json(config.memory_file)
    if memory is None:
        _log(f"INFO: hippocampus not installed ({config.memory_file})")
    emotion = load_optional_json(config.emotion_file)
    if emotion is None:
        _log(f"INFO: amygdala not installed ({config.emotion_file})")

    identity = load_identity(config)
    declared = expand_avatar_ref(identity.avatar_ref, config)
    if declared and not os.path.isfile(declared):
        _log(f"WARN: avatar not found ({declared}), trying workspace avatar.png/avatar.jpg")
    avatar = resolve_avatar_path(identity.avatar_ref, config)

    hippo = hippocampus_section(memory)
    amy   = amygdala_section(emotion)
    vta   = vta_section(reward)
    return {
        "agent_name": identity.name,
        "avatar_uri": avatar_data_uri(avatar) if avatar else "",
        "avatar_placeholder": AVATAR_PLACEHOLDER,
        "hippocampus": hippo,
        "amygdala": amy,
        "vta": vta,
        "state": build_state(hippo, amy, vta),
    }

def generate(config: DashboardConfig) -> GenerateResult:
    """Read the workspace and render the dashboard. Nothing is written."""
    if not os.path.isfile(config.reward_file):
        return GenerateResult(None, 1, f"❌ No VTA data found at {config.reward_file}")
    ctx = build_context(config, read_json(config.reward_file))
    return GenerateResult(render_dashboard(ctx), 0, f"⭐ Dashboard generated: {config.output_file}")

def main(environ=None):
    config = DashboardConfig.from_env(environ)
    result = generate(config)
    if result.exit_code != 0:
        print(result.message, file=sys.stderr)
        return result.exit_code
    write_dashboard(config.output_file, result.html)
    print(result.message)
    return 0

if __name__ == "__main__":
    sys.exit(main())
