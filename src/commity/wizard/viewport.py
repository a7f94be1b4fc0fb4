"""
Scrolling window over a list that is taller than the screen.

The window only moves when the selection leaves it, and then only as far
as needed to bring the selection back to its top or bottom edge.
"""


def scroll_window(
    list_length: int,
    window_height: int,
    selected_index: int,
    visible_start: int = 0,
    visible_end: int | None = None,
) -> tuple[int, int]:
    """
    Compute the visible range after the selection moved.

    Args:
        list_length: Number of items in the list.
        window_height: Rows available; values below 1 are treated as 1.
        selected_index: Index that must be visible.
        visible_start: Start of the previous window.
        visible_end: End (exclusive) of the previous window. Defaults to a
            full window starting at visible_start.

    Returns:
        (visible_start, visible_end), end exclusive.
    """
    if list_length <= 0:
        return 0, 0

    window_height = max(1, window_height)
    selected_index = max(0, min(selected_index, list_length - 1))

    visible_start = max(0, min(visible_start, list_length - 1))
    if visible_end is None:
        visible_end = visible_start + window_height
    visible_end = min(visible_end, list_length, visible_start + window_height)

    if selected_index < visible_start:
        visible_start = selected_index
        visible_end = min(visible_start + window_height, list_length)
    elif selected_index >= visible_end:
        visible_end = selected_index + 1
        visible_start = max(0, visible_end - window_height)

    return visible_start, visible_end


class Viewport:
    """Incremental scroller holding the window between moves."""

    def __init__(self, list_length: int, window_height: int):
        self.list_length = list_length
        self.window_height = max(1, window_height)
        self.start = 0
        self.end = min(self.window_height, list_length)

    def follow(self, selected_index: int) -> tuple[int, int]:
        """Scroll just enough to show selected_index and return the window."""
        self.start, self.end = scroll_window(
            self.list_length, self.window_height, selected_index, self.start, self.end
        )
        return self.start, self.end

    def __repr__(self) -> str:
        return f"Viewport(start={self.start}, end={self.end}, height={self.window_height})"
