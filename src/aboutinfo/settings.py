"""Runtime settings for the aboutinfo CLI."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from aboutinfo import __version__

DEFAULT_NL = "en_US"


@dataclass(frozen=True)
class RuntimeSettings:
    home_dir: Path
    state_dir: Path
    log_dir: Path
    nl: str = DEFAULT_NL
    cli_version: str = __version__

    @property
    def features_dir(self) -> Path:
        return self.home_dir / "features"

    @property
    def telemetry_file(self) -> Path:
        return self.log_dir / "telemetry.jsonl"


def _default_home_dir() -> Path:
    override = os.getenv("ABOUTINFO_HOME")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".aboutinfo"


def default_nl() -> str:
    """Return the national-language locale, e.g. ``de_CH``.

    ``ABOUTINFO_NL`` wins; otherwise the POSIX locale variables are consulted
    in the usual priority order and stripped of encoding and modifier parts.
    """

    for var in ("ABOUTINFO_NL", "LC_ALL", "LC_MESSAGES", "LANG"):
        value = os.getenv(var, "").strip()
        if not value or value in {"C", "POSIX"}:
            continue
        return value.split(".", 1)[0].split("@", 1)[0]
    return DEFAULT_NL


def load_settings() -> RuntimeSettings:
    base = _default_home_dir()
    return RuntimeSettings(
        home_dir=base,
        state_dir=base / "state",
        log_dir=base / "logs",
        nl=default_nl(),
    )


SETTINGS = load_settings()
