"""Stored defaults for the blobupload CLI.

The storage account, container, access token and request timeout can be
saved once with `blobupload config set` instead of being passed to every
`blobupload upload` call.
"""

from __future__ import annotations

import json
from pathlib import Path

CONFIG_KEYS = ("account", "container", "sas_token", "timeout_ms")


def get_config_dir() -> Path:
    """Directory holding the stored upload defaults (~/.blobupload)."""
    return Path.home() / ".blobupload"


def get_config_file() -> Path:
    """JSON file with the stored upload defaults."""
    return get_config_dir() / "config.json"


def load_config() -> dict[str, str]:
    """Return the stored upload defaults, empty if none were saved."""
    config_file = get_config_file()
    if not config_file.exists():
        return {}
    return {key: str(value) for key, value in json.loads(config_file.read_text()).items()}


def save_config(config: dict[str, str]) -> None:
    """Write the upload defaults, creating the directory on first use."""
    config_file = get_config_file()
    config_file.parent.mkdir(parents=True, exist_ok=True)
    config_file.write_text(json.dumps(config, indent=2))
