"""
Configuration utilities for the thangs CLI.
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


def load_env_vars() -> None:
    """
    Load environment variables from .env files in the following order:
    1. .thangs.env in the current directory
    2. .thangs.env in the user's home directory

    Variables already set in the environment are never overridden.
    """
    # Load from current directory
    if os.path.exists(".thangs.env"):
        load_dotenv(".thangs.env")

    # Load from home directory
    home_env = Path.home() / ".thangs.env"
    if home_env.exists():
        load_dotenv(home_env)


def get_config(key: str, default: Optional[str] = None) -> Optional[str]:
    """Get configuration value from environment variables."""
    return os.getenv(key, default)


def get_skill_dir() -> Path:
    """Directory the Claude skill is installed into."""
    configured = get_config("THANGS_SKILL_DIR")
    if configured:
        return Path(configured).expanduser()
    return Path.home() / ".claude" / "skills" / "things3"
