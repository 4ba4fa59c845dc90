from __future__ import annotations

from typing import List


class LogBuffer:
    """Owned raw-text accumulator shared by user edits and the synthetic feed."""

    def __init__(self, text: str = "") -> None:
        self._text = text

    @property
    def text(self) -> str:
        return self._text

    def replace(self, text: str) -> None:
        self._text = text

    def append(self, line: str) -> None:
        self._text = f"{self._text}\n{line}" if self._text else line

    def is_blank(self) -> bool:
        return not self._text.strip()

    def lines(self) -> List[str]:
        return [line for line in self._text.split("\n") if line.strip()]

    @property
    def line_count(self) -> int:
        return len(self.lines())
