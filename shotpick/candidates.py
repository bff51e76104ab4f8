"""Candidate sources that feed the picker.

A source is anything with a ``get_candidates()`` method returning the full,
unfiltered list of selectable strings. The session calls it again on every
query-changing key, so sources must not assume they are read only once.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol, Sequence

logger = logging.getLogger(__name__)

DEFAULT_PROJECTS: tuple[str, ...] = (
    "some_very_long_project_name",
    "some_other_long_project_name",
    "project_001",
    "project_002",
    "man_vs_bee",
    "pipeline_testing_2022_2",
    "asset_library_2024",
    "asset_library_2023",
    "rt_sandbox_2024",
    "rnd_sandbox_2024",
)


class CandidateSourceError(RuntimeError):
    """Raised when a candidate source cannot produce its list."""


class CandidateSource(Protocol):
    """Provider of the full candidate list.

    Implementations report failures by raising :class:`CandidateSourceError`.
    The session also wraps ``OSError`` and ``ValueError`` escaping
    ``get_candidates()``; any other exception is treated as a bug and ends the
    program.
    """

    def get_candidates(self) -> Sequence[str]:
        ...


class StaticCandidateSource:
    """In-memory candidate list; returns a fresh copy on every call."""

    def __init__(self, candidates: Sequence[str] = DEFAULT_PROJECTS) -> None:
        self._candidates = tuple(candidates)

    def get_candidates(self) -> list[str]:
        return list(self._candidates)


def read_text(path: Path) -> str:
    """Decode ``path`` as UTF-8 (BOM stripped), falling back to latin-1."""
    try:
        return path.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError:
        return path.read_text(encoding="latin-1")


class LineFileCandidateSource:
    """Candidates read from a text file, one per non-blank line.

    The file is re-read on every call so edits made while the picker is open
    show up on the next keystroke. Trailing whitespace is stripped; blank
    lines are skipped; order is preserved.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def get_candidates(self) -> list[str]:
        try:
            text = read_text(self.path)
        except OSError as exc:
            logger.debug("reading %s failed: %s", self.path, exc)
            raise CandidateSourceError(f"cannot read candidates from {self.path}: {exc.strerror or exc}") from exc
        return [line.rstrip() for line in text.splitlines() if line.strip()]
