"""Pytest fixtures for eno-codec tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest


@pytest.fixture
def temp_dir(tmp_path: Path) -> Path:
    """Create a temporary directory for tests."""
    return tmp_path


@pytest.fixture
def sample_release() -> dict[str, Any]:
    """A release document as decoded from JSON."""
    return {
        "title": "Night Drive",
        "artist": "The Examples",
        "year": 2021,
        "published": True,
        "tags": ["synth", "ambient"],
        "cover": {"file": "cover.jpg", "alt": "Neon road"},
        "description": "",
        "notes": None,
    }


@pytest.fixture
def sample_release_eno() -> str:
    """Block text of ``sample_release`` with default options."""
    return (
        "title: Night Drive\n"
        "artist: The Examples\n"
        "year: 2021\n"
        "published: true\n"
        "tags:\n"
        "- synth\n"
        "- ambient\n"
        "cover:\n"
        "  file=cover.jpg\n"
        "  alt=Neon road"
    )


@pytest.fixture
def json_tree(temp_dir: Path, sample_release: dict[str, Any]) -> Path:
    """Create a directory tree with JSON and non-JSON files.

    Layout::

        data/
            release.json
            readme.txt
            tracks/
                01-intro.json
                02-outro.json
    """
    root = temp_dir / "data"
    tracks = root / "tracks"
    tracks.mkdir(parents=True)

    (root / "release.json").write_text(json.dumps(sample_release), encoding="utf-8")
    (root / "readme.txt").write_text("not json", encoding="utf-8")
    (tracks / "01-intro.json").write_text(
        json.dumps({"title": "Intro", "number": 1, "explicit": False}), encoding="utf-8"
    )
    (tracks / "02-outro.json").write_text(
        json.dumps({"title": "Outro", "number": 2, "explicit": True}), encoding="utf-8"
    )
    return root


@pytest.fixture
def broken_json_tree(json_tree: Path) -> Path:
    """Add an undecodable JSON file to ``json_tree``."""
    (json_tree / "broken.json").write_text("{not valid json", encoding="utf-8")
    return json_tree


@pytest.fixture
def config_file(temp_dir: Path) -> Path:
    """Write a converter config file."""
    path = temp_dir / ".eno-codec.yaml"
    path.write_text(
        "output: null\n"
        "pattern: null\n"
        "ignore_empty: true\n"
        "skip_fields:\n"
        "  - artist\n"
        "use_flags: true\n"
        "force_multiline: []\n",
        encoding="utf-8",
    )
    return path
