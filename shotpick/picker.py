"""Query/selection state machine behind the picker UI.

``PickerSession`` owns a :class:`PickerState` and applies one transition per
key event: append or delete query characters, move the highlight, or exit.
Query edits re-run the substring filter against the candidate source and
reconcile the highlight so it stays on the same item when it still matches.

Transitions are all-or-nothing. New values are computed first and assigned
only after the candidate source has answered, so a failing source leaves the
state exactly as it was and the error propagates to the caller.
"""

from __future__ import annotations

import enum
import logging

from .candidates import CandidateSource, CandidateSourceError
from .filtering import filter_candidates
from .selection import NEXT, PREVIOUS, Direction, clamp_highlight, move_highlight, reconcile
from .state import PickerState

logger = logging.getLogger(__name__)


class RefetchPolicy(str, enum.Enum):
    """When the session asks the candidate source for a fresh snapshot."""

    ALWAYS = "always"
    ON_EMPTY_QUERY_ONLY = "on_empty_query_only"

    @classmethod
    def parse(cls, value: str | RefetchPolicy | None) -> RefetchPolicy:
        if isinstance(value, cls):
            return value
        if not value:
            return cls.ALWAYS
        return cls(str(value).strip().lower())


class PickerSession:
    def __init__(
        self,
        source: CandidateSource,
        refetch_policy: RefetchPolicy | str = RefetchPolicy.ALWAYS,
    ) -> None:
        self.source = source
        self.refetch_policy = RefetchPolicy.parse(refetch_policy)
        candidates = self._fetch()
        self.state = PickerState(candidates=candidates, filtered=list(candidates))

    @property
    def exited(self) -> bool:
        return self.state.exited

    @property
    def result(self) -> str:
        """Value handed back to the caller: the query at the moment of exit."""
        return self.state.query

    def _fetch(self) -> list[str]:
        try:
            candidates = list(self.source.get_candidates())
        except (OSError, ValueError) as exc:
            raise CandidateSourceError(f"candidate source failed: {exc}") from exc
        logger.debug("fetched %d candidates", len(candidates))
        return candidates

    def _snapshot_for_query(self) -> list[str]:
        if self.refetch_policy is RefetchPolicy.ALWAYS:
            return self._fetch()
        return self.state.candidates

    def _commit(self, query: str, candidates: list[str], filtered: list[str], highlight: int) -> None:
        state = self.state
        state.query = query
        state.candidates = candidates
        state.filtered = filtered
        state.highlight = clamp_highlight(highlight, len(filtered))
        if state.highlight == 0:
            state.list_start = 0
        state.dirty = True

    def type_char(self, char: str) -> None:
        """Append ``char`` to the query and re-filter."""
        query = self.state.query + char
        candidates = self._snapshot_for_query()
        filtered = filter_candidates(query, candidates)
        highlight = reconcile(self.state.filtered, self.state.highlight, filtered)
        self._commit(query, candidates, filtered, highlight)

    def backspace(self) -> None:
        """Drop the last query character; an emptied query shows everything."""
        if not self.state.query:
            return
        query = self.state.query[:-1]
        if not query:
            candidates = self._fetch()
            self._commit(query, candidates, list(candidates), 0)
            return
        candidates = self._snapshot_for_query()
        filtered = filter_candidates(query, candidates)
        highlight = reconcile(self.state.filtered, self.state.highlight, filtered)
        self._commit(query, candidates, filtered, highlight)

    def move(self, direction: Direction) -> None:
        new_highlight = move_highlight(self.state.highlight, len(self.state.filtered), direction)
        if new_highlight != self.state.highlight:
            self.state.highlight = new_highlight
            self.state.dirty = True

    def next(self) -> None:
        self.move(NEXT)

    def previous(self) -> None:
        self.move(PREVIOUS)

    def confirm(self) -> None:
        # Committing a selection is not wired to anything yet.
        return None

    def quit(self) -> None:
        self.state.exited = True
        self.state.dirty = True
