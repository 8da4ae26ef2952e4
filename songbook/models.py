# songbook/models.py
"""
Song, artist and genre entities.

A song *belongs to* one artist and one genre. It holds direct references
to them, and either reference may be unset. An artist or genre *has many*
songs, but it never stores them: songs() filters the registry for songs
that point back at it, so the answer is recomputed on every call.

Entities compare by identity. Two artists named "Jay Z" are two different
artists.
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional

from .registry import SongRegistry


class SongbookError(Exception):
    """Base class for songbook errors."""


class ArtistUnsetError(SongbookError, AttributeError):
    """Raised when a song's artist is read but none is set."""


class GenreUnsetError(SongbookError, AttributeError):
    """Raised when a song's genre is read but none is set."""


def _unique(values: List[Any]) -> List[Any]:
    """Drop duplicates (by identity) and None, keeping first-seen order."""
    seen = set()
    result = []
    for value in values:
        if value is None or id(value) in seen:
            continue
        seen.add(id(value))
        result.append(value)
    return result


@dataclass(eq=False)
class Artist:
    """
    An artist. Has many songs.

    Attributes:
        name: Display name
        registry: Registry queried for this artist's songs
    """
    name: str
    registry: SongRegistry = field(repr=False)

    def songs(self) -> List["Song"]:
        """Songs whose artist is this artist, in registration order."""
        return self.registry.filter(lambda s: s.artist is self)

    def add_song(self, name: str, genre: Optional["Genre"] = None) -> "Song":
        """
        Create a song by this artist.

        The genre is stored as given; no Genre is created or looked up.
        """
        return Song.new(self.registry, name, genre=genre, artist=self)

    def genres(self) -> List[Any]:
        """
        Distinct genres across this artist's songs.

        Genre values are returned as stored, so a song given a raw label
        contributes that label rather than a Genre.
        """
        return _unique([s.genre for s in self.songs()])


@dataclass(eq=False)
class Genre:
    """
    A genre. Has many songs.

    Attributes:
        name: Display name
        registry: Registry queried for this genre's songs
    """
    name: str
    registry: SongRegistry = field(repr=False)

    def songs(self) -> List["Song"]:
        """Songs whose genre is this genre, in registration order."""
        return self.registry.filter(lambda s: s.genre is self)

    def artists(self) -> List[Any]:
        """Distinct artists (as stored on the songs) with a song in this genre."""
        return _unique([s.artist for s in self.songs()])


@dataclass(eq=False)
class Song:
    """
    A song. Belongs to an artist and a genre.

    Both references can be reassigned at any time; the owning artist's or
    genre's songs() reflects the change on its next call.

    Attributes:
        name: Song title
        registry: Registry the song was registered in
        artist: Owning artist, if any
        genre: Genre, if any
    """
    name: str
    registry: SongRegistry = field(repr=False)
    artist: Optional[Artist] = None
    genre: Optional[Genre] = None

    @classmethod
    def new(
        cls,
        registry: SongRegistry,
        name: str,
        genre: Optional[Genre] = None,
        artist: Optional[Artist] = None,
    ) -> "Song":
        """
        Create a song and register it.

        Arguments are not type-checked.

        Returns:
            The registered Song
        """
        song = cls(name=name, registry=registry, artist=artist, genre=genre)
        registry.register(song)
        return song

    def artist_name(self) -> str:
        """Name of this song's artist."""
        if self.artist is None:
            raise ArtistUnsetError(f"Song {self.name!r} has no artist")
        return self.artist.name

    def genre_name(self) -> str:
        """Name of this song's genre."""
        if self.genre is None:
            raise GenreUnsetError(f"Song {self.name!r} has no genre")
        return self.genre.name

    def to_dict(self) -> dict:
        # References are unchecked, so a raw label may stand in for an entity
        return {
            "name": self.name,
            "artist": getattr(self.artist, "name", self.artist),
            "genre": getattr(self.genre, "name", self.genre),
        }
