# songbook/catalog.py
"""
Catalog - the top-level store for one application run.

The catalog owns the song registry and looks up artists and genres by
name. It is the only layer that turns plain string labels into Artist
and Genre entities. Below it, songs store whatever references they are
given.
"""

import logging
import threading
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from .models import Artist, Genre, Song, SongbookError
from .registry import SongRegistry

logger = logging.getLogger(__name__)


class CatalogFormatError(SongbookError, ValueError):
    """Raised when catalog YAML does not have the expected shape."""


def _entry_names(data: Dict[str, Any], key: str) -> List[str]:
    """Read an optional top-level list of names."""
    names = data.get(key) or []
    if not isinstance(names, list):
        raise CatalogFormatError(f"'{key}' must be a list of names")
    if any(n is None for n in names):
        raise CatalogFormatError(f"'{key}' contains an empty name")
    return [str(n) for n in names]


class Catalog:
    """
    Songs, artists and genres for one application run.

    Usage:
        catalog = Catalog()
        jay_z = catalog.artist("Jay Z")
        catalog.add_song("Empire State of Mind", artist=jay_z, genre="rap")

        jay_z.songs()  # [Song(name='Empire State of Mind', ...)]
    """

    def __init__(self, registry: SongRegistry = None):
        self.registry = registry if registry is not None else SongRegistry()
        self._artists: Dict[str, Artist] = {}
        self._genres: Dict[str, Genre] = {}
        self._lock = threading.Lock()

    def artist(self, name: str) -> Artist:
        """Get the artist with this name, creating it if needed."""
        with self._lock:
            artist = self._artists.get(name)
            if artist is None:
                artist = Artist(name=name, registry=self.registry)
                self._artists[name] = artist
                logger.debug(f"Created artist {name!r}")
        return artist

    def genre(self, name: str) -> Genre:
        """Get the genre with this name, creating it if needed."""
        with self._lock:
            genre = self._genres.get(name)
            if genre is None:
                genre = Genre(name=name, registry=self.registry)
                self._genres[name] = genre
                logger.debug(f"Created genre {name!r}")
        return genre

    def get_artist(self, name: str) -> Optional[Artist]:
        """Get an artist by name."""
        with self._lock:
            return self._artists.get(name)

    def get_genre(self, name: str) -> Optional[Genre]:
        """Get a genre by name."""
        with self._lock:
            return self._genres.get(name)

    def add_song(
        self,
        name: str,
        artist: Union[Artist, str, None] = None,
        genre: Union[Genre, str, None] = None,
    ) -> Song:
        """
        Create and register a song.

        Args:
            name: Song title
            artist: Artist entity or artist name (created if unknown)
            genre: Genre entity or genre name (created if unknown)

        Returns:
            The registered Song
        """
        if isinstance(artist, str):
            artist = self.artist(artist)
        if isinstance(genre, str):
            genre = self.genre(genre)
        return Song.new(self.registry, name, genre=genre, artist=artist)

    def artists(self) -> List[Artist]:
        """List all artists in creation order."""
        with self._lock:
            return list(self._artists.values())

    def genres(self) -> List[Genre]:
        """List all genres in creation order."""
        with self._lock:
            return list(self._genres.values())

    def songs(self) -> List[Song]:
        """List all songs in registration order."""
        return list(self.registry.all())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "artists": {
                a.name: [s.name for s in a.songs()] for a in self.artists()
            },
            "genres": {
                g.name: [s.name for s in g.songs()] for g in self.genres()
            },
            "songs": [s.to_dict() for s in self.songs()],
        }

    @classmethod
    def from_yaml(cls, yaml_content: str) -> "Catalog":
        """
        Build a catalog from YAML.

        Format:
            artists: [Name, ...]        # optional, entities with no songs
            genres: [name, ...]         # optional
            songs:
              - name: Song title
                artist: Artist name     # optional
                genre: genre name       # optional
        """
        try:
            data = yaml.safe_load(yaml_content)
        except yaml.YAMLError as e:
            raise CatalogFormatError(f"Invalid catalog YAML: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise CatalogFormatError("Catalog must be a mapping")

        catalog = cls()
        for name in _entry_names(data, "artists"):
            catalog.artist(name)
        for name in _entry_names(data, "genres"):
            catalog.genre(name)

        entries = data.get("songs") or []
        if not isinstance(entries, list):
            raise CatalogFormatError("'songs' must be a list")

        for i, entry in enumerate(entries):
            if isinstance(entry, str):
                entry = {"name": entry}
            if not isinstance(entry, dict) or entry.get("name") is None:
                raise CatalogFormatError(f"Song entry {i} has no name")
            artist = entry.get("artist")
            genre = entry.get("genre")
            catalog.add_song(
                str(entry["name"]),
                artist=str(artist) if artist is not None else None,
                genre=str(genre) if genre is not None else None,
            )

        logger.info(
            f"Loaded catalog: {len(catalog.registry)} songs, "
            f"{len(catalog.artists())} artists, {len(catalog.genres())} genres"
        )
        return catalog

    @classmethod
    def from_file(cls, path: Path | str) -> "Catalog":
        """Load a catalog from a YAML file."""
        with open(path, "r") as f:
            return cls.from_yaml(f.read())
