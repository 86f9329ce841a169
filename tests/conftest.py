"""Shared test fixtures."""

import pytest


class FakeSurface:
    """In-memory rendering surface that records calls and a character grid."""

    def __init__(self, width=80, height=24):
        self.width = width
        self.height = height
        self.calls = []
        self.grid = {}
        self.row = 0
        self.column = 0
        self.cursor_visible = True

    def clear_and_home(self):
        self.calls.append(("clear_and_home",))
        self.grid.clear()
        self.row = self.column = 0

    def write_styled(self, fragment):
        self.calls.append(("write_styled", fragment))
        for ch in fragment.text:
            self.grid[(self.row, self.column)] = (ch, fragment.style)
            self.column += 1

    def move_cursor_to(self, row, column):
        self.calls.append(("move_cursor_to", row, column))
        self.row, self.column = row, column

    def hide_cursor(self):
        self.calls.append(("hide_cursor",))
        self.cursor_visible = False

    def show_cursor(self):
        self.calls.append(("show_cursor",))
        self.cursor_visible = True

    def flush(self):
        self.calls.append(("flush",))

    def query_dimensions(self):
        self.calls.append(("query_dimensions",))
        return (self.width, self.height)

    def cell(self, row, column):
        return self.grid.get((row, column))

    def row_text(self, row):
        cells = sorted((c, ch) for (r, c), (ch, _) in self.grid.items() if r == row)
        return "".join(ch for _, ch in cells)

    def call_names(self):
        return [c[0] for c in self.calls]


@pytest.fixture
def surface():
    return FakeSurface()
