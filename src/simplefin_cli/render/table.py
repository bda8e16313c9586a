"""
Minimal box-drawing table writer for terminal output.
"""

import sys
import unicodedata
from typing import List, Optional, Sequence, TextIO

LEFT = "left"
RIGHT = "right"
CENTER = "center"

# Light box style
HORIZONTAL = "─"
VERTICAL = "│"
TOP = ("┌", "┬", "┐")
MIDDLE = ("├", "┼", "┤")
BOTTOM = ("└", "┴", "┘")


def display_width(text: str) -> int:
    """
    Number of terminal cells a string occupies.

    Wide and full-width characters take two cells, combining marks none.
    """
    width = 0
    for char in text:
        if unicodedata.combining(char):
            continue
        width += 2 if unicodedata.east_asian_width(char) in ("W", "F") else 1
    return width


def align_cell(text: str, width: int, align: str) -> str:
    """Pad text to width with the given alignment."""
    gap = width - display_width(text)
    if gap <= 0:
        return text
    if align == RIGHT:
        return " " * gap + text
    if align == CENTER:
        left = gap // 2
        return " " * left + text + " " * (gap - left)
    return text + " " * gap


class TableWriter:
    """
    Collects a header and rows, then renders them as a bordered table.

    Rows may be split into groups with ``append_separator``. Columns are
    configured by zero-based index with an alignment and an optional
    auto-merge flag, which blanks a cell repeating the value directly above
    it within the same group.
    """

    def __init__(
        self,
        aligns: Optional[Sequence[str]] = None,
        auto_merge: Sequence[int] = (),
    ):
        self.aligns = list(aligns or [])
        self.auto_merge = set(auto_merge)
        self.header: List[str] = []
        # None marks a separator line
        self.rows: List[Optional[List[str]]] = []

    def append_header(self, cells: Sequence[str]) -> None:
        self.header = [str(cell) for cell in cells]

    def append_row(self, cells: Sequence[object]) -> None:
        self.rows.append([str(cell) for cell in cells])

    def append_separator(self) -> None:
        self.rows.append(None)

    def _column_count(self) -> int:
        counts = [len(self.header)] + [len(row) for row in self.rows if row is not None]
        return max(counts)

    def _align(self, column: int) -> str:
        return self.aligns[column] if column < len(self.aligns) else LEFT

    def _merged_rows(self, columns: int) -> List[Optional[List[str]]]:
        merged: List[Optional[List[str]]] = []
        previous: Optional[List[str]] = None
        for row in self.rows:
            if row is None:
                merged.append(None)
                previous = None
                continue
            padded = row + [""] * (columns - len(row))
            shown = list(padded)
            if previous is not None:
                for column in self.auto_merge:
                    if column < columns and padded[column] == previous[column]:
                        shown[column] = ""
            merged.append(shown)
            previous = padded
        return merged

    def render_lines(self) -> List[str]:
        """Render the table into a list of lines without trailing newlines."""
        columns = self._column_count()
        header = self.header + [""] * (columns - len(self.header))
        rows = self._merged_rows(columns)

        widths = [display_width(cell) for cell in header]
        for row in rows:
            if row is None:
                continue
            for column, cell in enumerate(row):
                widths[column] = max(widths[column], display_width(cell))

        def rule(parts: Sequence[str]) -> str:
            left, joint, right = parts
            return left + joint.join(HORIZONTAL * (w + 2) for w in widths) + right

        def line(cells: Sequence[str], header_line: bool = False) -> str:
            padded = [
                align_cell(cell, widths[column], LEFT if header_line else self._align(column))
                for column, cell in enumerate(cells)
            ]
            return VERTICAL + VERTICAL.join(f" {cell} " for cell in padded) + VERTICAL

        lines = [rule(TOP), line(header, header_line=True)]
        if rows:
            lines.append(rule(MIDDLE))
        for row in rows:
            lines.append(rule(MIDDLE) if row is None else line(row))
        lines.append(rule(BOTTOM))
        return lines

    def render(self, stream: Optional[TextIO] = None) -> None:
        """Write the table to stream (stdout by default)."""
        stream = stream if stream is not None else sys.stdout
        stream.write("\n".join(self.render_lines()) + "\n")
