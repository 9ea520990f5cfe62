from typing import Callable, List

COMPACT_BREAKPOINT = 768
SCROLL_TOP_THRESHOLD = 200

Listener = Callable[["ViewportController"], None]


class ViewportController:
    """Layout flags derived from the window width and the vertical scroll offset."""

    def __init__(self, width: int = COMPACT_BREAKPOINT, offset: int = 0):
        self.width = width
        self.offset = offset
        self._listeners: List[Listener] = []

    @property
    def compact(self) -> bool:
        return self.width < COMPACT_BREAKPOINT

    @property
    def show_scroll_top(self) -> bool:
        return self.offset > SCROLL_TOP_THRESHOLD

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def resize(self, width: int) -> bool:
        before = self.compact
        self.width = width
        return self._notify_if(before != self.compact)

    def scroll(self, offset: int) -> bool:
        before = self.show_scroll_top
        self.offset = max(0, offset)
        return self._notify_if(before != self.show_scroll_top)

    def scroll_to_top_path(self, steps: int = 12) -> List[int]:
        """Offsets for a smooth scroll back to the top, ease-out, ending at 0."""
        start = self.offset
        if start <= 0:
            return []
        path = []
        for i in range(1, steps + 1):
            t = i / steps
            eased = 1 - (1 - t) ** 3
            pos = int(round(start * (1 - eased)))
            if pos >= (path[-1] if path else start):
                continue
            path.append(pos)
        return path

    def _notify_if(self, changed: bool) -> bool:
        if changed:
            for listener in list(self._listeners):
                listener(self)
        return changed
