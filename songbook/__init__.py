# songbook - "has many / belongs to" associations for songs, artists and genres
#
# A song belongs to one artist and one genre. Artists and genres have many
# songs, computed by scanning a shared registry rather than stored, so each
# song's membership lives in exactly one place.
#
# Core concepts:
# - SongRegistry: Append-only, ordered collection of every song
# - Song: Holds references to its artist and genre
# - Artist / Genre: Derive their songs by filtering the registry
# - Catalog: One registry plus name lookups for artists and genres

from .registry import SongRegistry
from .models import (
    Artist,
    ArtistUnsetError,
    Genre,
    GenreUnsetError,
    Song,
    SongbookError,
)
from .catalog import Catalog, CatalogFormatError

__all__ = [
    # Core
    "SongRegistry",
    "Song",
    "Artist",
    "Genre",
    "Catalog",
    # Errors
    "SongbookError",
    "ArtistUnsetError",
    "GenreUnsetError",
    "CatalogFormatError",
]

__version__ = "0.1.0"
