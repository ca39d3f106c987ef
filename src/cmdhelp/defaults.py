"""Process-scoped defaults for heading, copyright and sentences."""

from __future__ import annotations

import sys
import threading
from dataclasses import dataclass, field
from datetime import date
from importlib import metadata
from pathlib import Path

from .sentences import SentenceBuilder


@dataclass(frozen=True, slots=True)
class HelpDefaults:
    """Values the help builder falls back to when settings leave them unset."""

    heading: str = ""
    copyright: str = ""
    program_name: str = ""
    license_lines: tuple[str, ...] = ()
    usage_lines: tuple[str, ...] = ()
    sentence_builder: SentenceBuilder = field(default_factory=SentenceBuilder)

    @classmethod
    def from_environment(
        cls,
        distribution: str | None = None,
        argv: list[str] | None = None,
    ) -> "HelpDefaults":
        """Derive defaults from ``sys.argv`` and installed distribution metadata."""
        args = sys.argv if argv is None else argv
        program_name = Path(args[0]).stem if args and args[0] else ""

        heading = program_name
        copyright_text = ""
        if distribution:
            try:
                dist_metadata = metadata.metadata(distribution)
            except metadata.PackageNotFoundError:
                dist_metadata = None
            if dist_metadata is not None:
                heading = f"{dist_metadata['Name']} {dist_metadata['Version']}"
                author = dist_metadata.get("Author") or dist_metadata.get("Author-email")
                if author:
                    copyright_text = f"Copyright (C) {date.today().year} {author}"

        return cls(heading=heading, copyright=copyright_text, program_name=program_name)


_default_lock = threading.Lock()
_default: HelpDefaults | None = None


def get_default_help_defaults() -> HelpDefaults:
    """Return the process-wide defaults, computing them exactly once."""
    global _default
    if _default is None:
        with _default_lock:
            if _default is None:
                _default = HelpDefaults.from_environment()
    return _default
