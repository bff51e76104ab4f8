from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class PickerState:
    query: str = ""
    candidates: list[str] = field(default_factory=list)
    filtered: list[str] = field(default_factory=list)
    highlight: int = 0
    exited: bool = False
    list_start: int = 0
    status_message: str = ""
    dirty: bool = True

    @property
    def highlighted_item(self) -> str | None:
        if 0 <= self.highlight < len(self.filtered):
            return self.filtered[self.highlight]
        return None
