# songbook/registry/registry.py
"""
Song registry.

The registry is the single collection of every song created. Artists and
genres hold no song lists of their own; they answer "which songs are mine"
by scanning this registry, so there is exactly one place where a song's
membership is recorded.

The registry is append-only:
- register() appends, with no uniqueness check
- all() returns a snapshot in insertion order
- there is no remove()
"""

import logging
import threading
from typing import TYPE_CHECKING, Callable, Iterator, List, Tuple

if TYPE_CHECKING:
    from ..models import Song

logger = logging.getLogger(__name__)


class SongRegistry:
    """
    Ordered, append-only collection of songs.

    Songs are compared by identity, never by value: two songs with the same
    name are two entries.
    """

    def __init__(self):
        self._songs: List["Song"] = []
        self._lock = threading.Lock()

    def register(self, song: "Song") -> "Song":
        """
        Append a song to the registry.

        Registering the same song twice stores it twice.

        Returns:
            The registered song
        """
        with self._lock:
            self._songs.append(song)
            position = len(self._songs)
        logger.debug(f"Registered song #{position}: {getattr(song, 'name', song)!r}")
        return song

    def all(self) -> Tuple["Song", ...]:
        """All songs in registration order (read-only snapshot)."""
        with self._lock:
            return tuple(self._songs)

    def filter(self, predicate: Callable[["Song"], bool]) -> List["Song"]:
        """
        Linear scan: songs matching predicate, in registration order.

        The snapshot is taken under the lock; the predicate runs outside it.
        """
        return [s for s in self.all() if predicate(s)]

    def find_by_name(self, name: str) -> List["Song"]:
        """Find songs with a specific name."""
        return self.filter(lambda s: s.name == name)

    def __contains__(self, song: object) -> bool:
        return any(s is song for s in self.all())

    def __len__(self) -> int:
        with self._lock:
            return len(self._songs)

    def __iter__(self) -> Iterator["Song"]:
        return iter(self.all())
