"""Build Tracks from the payloads of each metadata source.

Fetching happens elsewhere; these functions take the already-decoded JSON
of one source and return Tracks that can be compared with ``equals``.

Sources:
  catalog:   release database tracklist (authoritative target)
  beatport:  store search results, artists typed as artist/remixer
  bandcamp:  band name + free-text title, resolved through ``parse``
"""

import logging
import re

from trackmatch.config import (
    BEATPORT_ARTIST_TYPE,
    BEATPORT_NAME_SEPARATOR,
    BEATPORT_REMIXER_TYPE,
    CATALOG_TITLE_PREFIX,
    CREDIT_SUFFIX_PATTERN,
    REMIX_ROLE_KEYWORD,
)
from trackmatch.track import Track, ascii_lower, equals, parse

logger = logging.getLogger(__name__)


# ── Name cleanup ─────────────────────────────────────────────────────

def strip_artist_name_chars(text):
    """Remove "&" and "," and squeeze the gaps they leave.

    "Sonartek & Gorbani" → "Sonartek Gorbani"
    """
    s = text.replace("&", "").replace(",", "")
    s = re.sub(r"\s{2,}", " ", s)
    return s.strip()


def clean_credit_name(text):
    """Drop the catalog's "(N)" disambiguation suffix: "Barac (2)" → "Barac"."""
    return CREDIT_SUFFIX_PATTERN.sub("", text, count=1).strip()


# ── Catalog ──────────────────────────────────────────────────────────

def _credit_names(credits):
    return [clean_credit_name(c.get("name", "")) for c in credits]


def _remixer_credits(credits):
    return [c for c in credits
            if REMIX_ROLE_KEYWORD in (c.get("role") or "").lower()]


def release_catno(release):
    """Catalog number of the first label, or "" when the release has none."""
    labels = release.get("labels") or []
    if not labels:
        return ""
    return labels[0].get("catno") or ""


def track_from_catalog_entry(entry, release):
    """Target Track for one tracklist entry of a catalog release.

    Entry credits win over release credits.  The title is run through the
    parser behind a dummy artist so remix annotations in it are dropped
    from the name.
    """
    title = entry.get("title") or ""
    name = parse(CATALOG_TITLE_PREFIX + title).name

    if entry.get("artists"):
        artists = _credit_names(entry["artists"])
    else:
        artists = [strip_artist_name_chars(a.get("name", ""))
                   for a in release.get("artists") or []]

    remix = _credit_names(_remixer_credits(entry.get("extraartists") or []))

    return Track(
        name=name,
        artists=artists,
        remix=remix,
        catno=release_catno(release),
        position=entry.get("position") or "",
    )


def tracks_from_release(release):
    """Target Tracks for every entry of a release tracklist, in order."""
    return [track_from_catalog_entry(entry, release)
            for entry in release.get("tracklist") or []]


# ── Beatport ─────────────────────────────────────────────────────────

def _beatport_names(artists, artist_type):
    return [a.get("artist_name", "") for a in artists
            if ascii_lower(a.get("artist_type_name") or "") == artist_type]


def track_from_beatport(entry):
    """Track for one Beatport search result entry.

    Artists are typed, so no title parsing is needed.  Some track names
    repeat the artist ("Artist - Name"); only the part after the last
    separator is kept.
    """
    artists = entry.get("artists") or []
    name = entry.get("track_name") or ""
    if BEATPORT_NAME_SEPARATOR in name:
        name = name.split(BEATPORT_NAME_SEPARATOR)[-1]
    number = entry.get("track_number")

    return Track(
        name=name,
        artists=_beatport_names(artists, BEATPORT_ARTIST_TYPE),
        remix=_beatport_names(artists, BEATPORT_REMIXER_TYPE),
        catno=entry.get("catalog_number") or "",
        position="" if number is None else str(number),
    )


# ── Bandcamp ─────────────────────────────────────────────────────────

def track_from_bandcamp(band_name, title):
    """Bandcamp only has a band name and a free-text title."""
    return parse(f"{band_name} - {title}")


def tracks_from_bandcamp_album(album):
    """Tracks for the "trackinfo" list of a Bandcamp album page."""
    artist = album.get("artist") or ""
    return [track_from_bandcamp(artist, t.get("title") or "")
            for t in album.get("trackinfo") or []]


# ── Matching ─────────────────────────────────────────────────────────

def find_match(target, candidates):
    """Return the first candidate equal to ``target``, or None."""
    for candidate in candidates:
        logger.debug("Check if %r matches %r", target, candidate)
        if equals(target, candidate):
            logger.debug("Match found for %r", target.name)
            return candidate
    return None


def match_tracklist(targets, candidates):
    """First matching candidate (or None) for each target, in target order."""
    candidates = list(candidates)
    results = [find_match(t, candidates) for t in targets]
    found = sum(1 for r in results if r is not None)
    logger.info("Matched %d/%d tracks", found, len(results))
    return results
