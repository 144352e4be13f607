"""Config file discovery.

Walk-up finder locates agecalc.toml, similar to how git finds .git/.
AGECALC_CONFIG names a file directly; ``--config`` is handled by
:meth:`AgeCalcSettings.from_cli`.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "agecalc.toml"
CONFIG_ENV_VAR = "AGECALC_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for agecalc.toml.

    Returns the path to the config file, or None if not found.
    AGECALC_CONFIG wins over the walk-up when set.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        if p.is_file():
            return p
        return None

    current = (start or Path.cwd()).resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None

