# src/window_switcher/engine/selection.py
"""Selection cursor over the ranked window list."""


class SelectionCursor:
    """
    Highlighted row in the displayed list.

    ``count`` is the size of the list currently on screen and is updated
    through ``clamp`` every time the list is re-rendered.
    """

    def __init__(self):
        self.index = 0
        self.count = 0

    def next(self):
        if self.count:
            self.index = (self.index + 1) % self.count

    def previous(self):
        if self.count:
            self.index = (self.index - 1) % self.count

    def reset(self):
        self.index = 0

    def clamp(self, count):
        """
        Keep the index inside a list of ``count`` entries.

        The index only moves when it would point past the end, so a
        refresh that drops a few windows keeps the highlight near where
        it was.
        """
        self.count = max(count, 0)
        if self.count == 0:
            self.index = 0
        elif self.index >= self.count:
            self.index = self.count - 1
