# accordion.py
from __future__ import annotations


class Accordion:
    """Exclusive-open panel flags: at most one panel is open at a time."""

    def __init__(self, panel_count: int = 3):
        self._open = [i == 0 for i in range(panel_count)]

    @property
    def open_states(self) -> list[bool]:
        return list(self._open)

    def is_open(self, index: int) -> bool:
        return 0 <= index < len(self._open) and self._open[index]

    def toggle(self, index: int) -> None:
        target = not self.is_open(index)
        self._open = [target if i == index else False for i in range(len(self._open))]
