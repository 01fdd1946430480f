"""Shared fixtures for the converter tests."""

import json
from pathlib import Path

import pytest


SAMPLE_LIBRARY = {
    "tracks": [
        {
            "artist": "Hozier",
            "album": "Hozier",
            "track": "Take Me to Church",
            "uri": "spotify:track:1CS7Sd1u5tWkstBhpssyjP",
        },
        {
            "artist": "Daft Punk",
            "album": "Discovery",
            "track": "One More Time",
            "uri": "spotify:track:0DiWol3AO6WpXZgp0goxAV",
        },
        {
            "artist": "Radiohead",
            "album": "OK Computer",
            "track": "Airbag",
            "uri": "spotify:track:6ciYvYVvbkWKnU2pCm4b2o",
        },
    ],
    "bannedTracks": [
        {
            "artist": "Nickelback",
            "album": "Silver Side Up",
            "track": "How You Remind Me",
            "uri": "spotify:track:0gmbgwZ8iqyMPmXefof8Yf",
        }
    ],
    "albums": [
        {
            "artist": "Daft Punk",
            "album": "Discovery",
            "uri": "spotify:album:2noRn2Aes5aoNVsU6iWThc",
        }
    ],
    "artists": [{"name": "Hozier", "uri": "spotify:artist:2FXC3k01G6Gw61bmprjgqS"}],
    "bannedArtists": [],
    "shows": [{}],
    "episodes": [],
    "other": [],
}


@pytest.fixture
def sample_library() -> dict:
    """A small export with every category present."""
    return json.loads(json.dumps(SAMPLE_LIBRARY))


@pytest.fixture
def write_library(tmp_path):
    """Write a library document (dict or raw text) and return its path."""

    def _write(content, name: str = "YourLibrary.json") -> Path:
        path = tmp_path / name
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_text(json.dumps(content), encoding="utf-8")
        return path

    return _write
