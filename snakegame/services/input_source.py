"""
Input sources deliver key identifiers (e.g. "ArrowUp") to a single listener.
"""

from typing import Callable, Iterable, List, Optional


class InputSource:
    """
    Base class/interface for key input.

    Subclasses implement ``poll``; the session subscribes a listener and
    detaches it again when the game ends.
    """

    def __init__(self):
        self._listener: Optional[Callable[[str], object]] = None

    @property
    def subscribed(self) -> bool:
        return self._listener is not None

    def subscribe(self, listener: Callable[[str], object]):
        self._listener = listener

    def unsubscribe(self):
        self._listener = None

    def emit(self, key: str):
        if self._listener is not None:
            self._listener(key)

    def poll(self, timeout: float) -> bool:
        """
        Wait up to ``timeout`` seconds for input and emit what arrives.

        Returns:
            False if the user asked to quit, True otherwise.
        """
        raise NotImplementedError


class ScriptedInput(InputSource):
    """
    Replays a fixed list of keys, one per poll.

    ``None`` entries stand for "no key this step". Once the script runs out
    every poll is empty.
    """

    def __init__(self, keys: Iterable[Optional[str]]):
        super().__init__()
        self.keys: List[Optional[str]] = list(keys)
        self.position = 0

    @property
    def exhausted(self) -> bool:
        return self.position >= len(self.keys)

    def poll(self, timeout: float) -> bool:
        if self.exhausted:
            return True
        key = self.keys[self.position]
        self.position += 1
        if key is not None:
            self.emit(key)
        return True
