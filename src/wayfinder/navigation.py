"""Navigation drawer state shared with every view.

Lets any view open or close the side navigation on small screens.
"""

from collections.abc import Callable


class NavigationContext:
    """Open/closed flag for the side navigation."""

    __slots__ = ("_is_open", "_listeners")

    def __init__(self, is_open: bool = False) -> None:
        self._is_open = is_open
        self._listeners: list[Callable[[bool], None]] = []

    @property
    def is_open(self) -> bool:
        return self._is_open

    def set_open(self, value: bool) -> None:
        if value == self._is_open:
            return
        self._is_open = value
        for listener in list(self._listeners):
            listener(value)

    def toggle(self) -> None:
        self.set_open(not self._is_open)

    def subscribe(self, listener: Callable[[bool], None]) -> Callable[[], None]:
        """Call *listener* on every change. Returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def __repr__(self) -> str:
        return f"NavigationContext(is_open={self._is_open})"
