"""Shared fixtures for trackmatch tests."""

import pytest


def make_credit(name, role=""):
    """Catalog credit as found in a release's artists/extraartists lists."""
    return {"name": name, "role": role, "id": 1, "resource_url": ""}


def make_beatport_artist(name, artist_type="Artist"):
    return {"artist_id": 1, "artist_name": name, "artist_type_name": artist_type}


@pytest.fixture
def release():
    """Minimal catalog release with a remixed A side and a plain B side."""
    return {
        "title": "Terula EP",
        "artists": [make_credit("Ted Amber")],
        "labels": [{"name": "Bondage Music", "catno": "BM006"}],
        "tracklist": [
            {
                "position": "A1",
                "title": "Terula",
                "duration": "7:12",
                "type_": "track",
            },
            {
                "position": "B1",
                "title": "Terula (Barut Remix)",
                "duration": "8:01",
                "type_": "track",
                "extraartists": [make_credit("Barut (2)", "Remix")],
            },
        ],
    }


@pytest.fixture
def beatport_entry():
    """One entry of a Beatport track search result."""
    return {
        "score": 12.5,
        "artists": [
            make_beatport_artist("Egal 3"),
            make_beatport_artist("Povestea Continua", "Remixer"),
        ],
        "catalog_number": "MEM011",
        "guid": "c0ffee",
        "mix_name": "Povestea Continua Mix",
        "track_id": 17000000,
        "track_name": "Play You",
        "track_number": 2,
    }
