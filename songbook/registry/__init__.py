# songbook/registry/__init__.py
"""
Songbook registry.

The registry is the single store of every song. Artists and genres find
their songs by filtering it instead of keeping their own lists.

Example:
    registry = SongRegistry()
    song = Song.new(registry, "Lotta Years")

    assert registry.all() == (song,)
"""

from .registry import SongRegistry

__all__ = ["SongRegistry"]
