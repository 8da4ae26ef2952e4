#!/usr/bin/env python3
"""
Songbook CLI

Query a catalog file from the command line:
  songbook songs <catalog.yaml> [--artist NAME] [--genre NAME]
  songbook artists <catalog.yaml>
  songbook genres <catalog.yaml>
  songbook dump <catalog.yaml>
"""

import argparse
import logging
import sys

import yaml

from .catalog import Catalog, CatalogFormatError
from .models import Song


def _format_song(song: Song) -> str:
    artist = song.artist.name if song.artist is not None else "-"
    genre = song.genre.name if song.genre is not None else "-"
    return f"{song.name}  [{artist} / {genre}]"


def load_catalog(path: str) -> Catalog:
    """Load a catalog, exiting with an error message on failure."""
    try:
        return Catalog.from_file(path)
    except (OSError, CatalogFormatError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def cmd_songs(args):
    """List songs, optionally narrowed to one artist and/or genre."""
    catalog = load_catalog(args.catalog)
    songs = catalog.songs()

    if args.artist is not None:
        artist = catalog.get_artist(args.artist)
        if artist is None:
            print(f"Error: unknown artist: {args.artist}", file=sys.stderr)
            sys.exit(1)
        songs = artist.songs()

    if args.genre is not None:
        genre = catalog.get_genre(args.genre)
        if genre is None:
            print(f"Error: unknown genre: {args.genre}", file=sys.stderr)
            sys.exit(1)
        songs = [s for s in songs if s.genre is genre]

    for song in songs:
        print(_format_song(song))


def cmd_artists(args):
    """List artists with song counts and genres."""
    catalog = load_catalog(args.catalog)
    for artist in catalog.artists():
        genres = ", ".join(g.name for g in artist.genres()) or "-"
        print(f"{artist.name}: {len(artist.songs())} songs ({genres})")


def cmd_genres(args):
    """List genres with song counts and artists."""
    catalog = load_catalog(args.catalog)
    for genre in catalog.genres():
        artists = ", ".join(a.name for a in genre.artists()) or "-"
        print(f"{genre.name}: {len(genre.songs())} songs ({artists})")


def cmd_dump(args):
    """Print the whole catalog as YAML."""
    catalog = load_catalog(args.catalog)
    print(yaml.safe_dump(catalog.to_dict(), sort_keys=False), end="")


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="songbook",
        description="Songbook - songs, artists and genres",
    )
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    songs_parser = subparsers.add_parser("songs", help="List songs")
    songs_parser.add_argument("catalog", help="Catalog YAML file")
    songs_parser.add_argument("--artist", help="Only songs by this artist")
    songs_parser.add_argument("--genre", help="Only songs in this genre")

    artists_parser = subparsers.add_parser("artists", help="List artists")
    artists_parser.add_argument("catalog", help="Catalog YAML file")

    genres_parser = subparsers.add_parser("genres", help="List genres")
    genres_parser.add_argument("catalog", help="Catalog YAML file")

    dump_parser = subparsers.add_parser("dump", help="Print catalog as YAML")
    dump_parser.add_argument("catalog", help="Catalog YAML file")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "songs":
        cmd_songs(args)
    elif args.command == "artists":
        cmd_artists(args)
    elif args.command == "genres":
        cmd_genres(args)
    elif args.command == "dump":
        cmd_dump(args)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
