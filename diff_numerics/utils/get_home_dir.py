"""Utility to discover the diff-numerics home directory."""

import os
from pathlib import Path


def get_home_dir() -> Path:
    """Get home directory based on DIFF_NUMERICS_HOME or default to ~/.diff-numerics."""
    home_env = os.environ.get("DIFF_NUMERICS_HOME")
    if home_env:
        return Path(home_env).expanduser().resolve()
    return Path.home() / ".diff-numerics"
