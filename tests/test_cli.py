# tests/test_cli.py
"""Tests for the songbook command-line interface."""

import logging
import tempfile
from pathlib import Path

import pytest
import yaml

from songbook.cli import main


CATALOG_YAML = """
songs:
  - name: Empire State of Mind
    artist: Jay Z
    genre: rap
  - name: Lotta Years
    artist: Aesop Rock
    genre: rap
  - name: None Shall Pass
    artist: Aesop Rock
    genre: pop
  - name: Orphan
"""


@pytest.fixture
def catalog_file():
    """Write a catalog YAML file."""
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "catalog.yaml"
        path.write_text(CATALOG_YAML)
        yield str(path)


class TestSongsCommand:
    """Tests for `songbook songs`."""

    def test_all_songs(self, catalog_file, capsys):
        main(["songs", catalog_file])
        lines = capsys.readouterr().out.splitlines()

        assert lines == [
            "Empire State of Mind  [Jay Z / rap]",
            "Lotta Years  [Aesop Rock / rap]",
            "None Shall Pass  [Aesop Rock / pop]",
            "Orphan  [- / -]",
        ]

    def test_filter_by_artist(self, catalog_file, capsys):
        main(["songs", catalog_file, "--artist", "Jay Z"])
        out = capsys.readouterr().out

        assert "Empire State of Mind" in out
        assert "Aesop Rock" not in out

    def test_filter_by_artist_and_genre(self, catalog_file, capsys):
        main(["songs", catalog_file, "--artist", "Aesop Rock", "--genre", "pop"])
        lines = capsys.readouterr().out.splitlines()

        assert lines == ["None Shall Pass  [Aesop Rock / pop]"]

    def test_unknown_artist(self, catalog_file, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["songs", catalog_file, "--artist", "Nobody"])

        assert exc.value.code == 1
        assert "unknown artist" in capsys.readouterr().err

    def test_unknown_genre(self, catalog_file, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["songs", catalog_file, "--genre", "polka"])

        assert exc.value.code == 1
        assert "unknown genre" in capsys.readouterr().err

    def test_empty_artist_is_a_filter(self, catalog_file, capsys):
        """An empty --artist is looked up, not ignored."""
        with pytest.raises(SystemExit) as exc:
            main(["songs", catalog_file, "--artist", ""])

        assert exc.value.code == 1
        assert "unknown artist" in capsys.readouterr().err

    def test_verbose_logs_debug(self, catalog_file, capsys, caplog):
        """-v emits debug records while loading."""
        with caplog.at_level(logging.DEBUG, logger="songbook"):
            main(["-v", "songs", catalog_file, "--artist", "Jay Z"])

        assert "Empire State of Mind" in capsys.readouterr().out
        assert any("Created artist 'Jay Z'" in r.getMessage() for r in caplog.records)


class TestListingCommands:
    """Tests for `songbook artists`, `genres` and `dump`."""

    def test_artists(self, catalog_file, capsys):
        main(["artists", catalog_file])
        lines = capsys.readouterr().out.splitlines()

        assert lines == [
            "Jay Z: 1 songs (rap)",
            "Aesop Rock: 2 songs (rap, pop)",
        ]

    def test_genres(self, catalog_file, capsys):
        main(["genres", catalog_file])
        lines = capsys.readouterr().out.splitlines()

        assert lines == [
            "rap: 2 songs (Jay Z, Aesop Rock)",
            "pop: 1 songs (Aesop Rock)",
        ]

    def test_dump(self, catalog_file, capsys):
        main(["dump", catalog_file])
        data = yaml.safe_load(capsys.readouterr().out)

        assert data["artists"]["Aesop Rock"] == ["Lotta Years", "None Shall Pass"]
        assert data["songs"][-1] == {"name": "Orphan", "artist": None, "genre": None}


class TestErrors:
    """Tests for CLI error handling."""

    def test_missing_file(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["songs", "/nonexistent/catalog.yaml"])

        assert exc.value.code == 1
        assert "Error" in capsys.readouterr().err

    def test_malformed_file(self, capsys):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "bad.yaml"
            path.write_text("songs: 3\n")

            with pytest.raises(SystemExit) as exc:
                main(["artists", str(path)])

        assert exc.value.code == 1
        assert "songs" in capsys.readouterr().err

    def test_no_command(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main([])
        assert exc.value.code == 1
