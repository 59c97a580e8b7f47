"""Canonical track record, title resolution, and cross-source equality.

``parse`` folds the parser's fragments into a Track; ``equals`` decides
whether two Tracks (usually one from the release catalog and one built from
a store's search result) name the same recording.
"""

import json
import string
from dataclasses import dataclass, field

from trackmatch.config import DISCARDED_REMIXERS
from trackmatch.lexer import lex
from trackmatch.parser import (
    ArtistName,
    Label,
    Remix,
    TrackName,
    TrackSide,
    parse_fragments,
)

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def ascii_lower(text):
    """Lowercase A-Z only; other characters are left as they are."""
    return text.translate(_ASCII_LOWER)


def _unique(values):
    """Drop exact duplicates, keeping first-seen order."""
    return list(dict.fromkeys(values))


def _name_list(value):
    """A stored name list; a lone string is one name, not its characters."""
    if not value:
        return []
    if isinstance(value, str):
        return [value]
    return list(value)


@dataclass
class Track:
    name: str = ""
    artists: list[str] = field(default_factory=list)   # unique, order not meaningful
    remix: list[str] = field(default_factory=list)     # unique, order not meaningful
    catno: str = ""
    position: str = ""                                 # vinyl side ("A1") or track number

    def __post_init__(self):
        self.artists = _unique(self.artists)
        self.remix = _unique(self.remix)

    @classmethod
    def from_str(cls, text):
        return parse(text)

    def artist_name(self, separator=" "):
        """All artists joined into one string, e.g. for a search query."""
        return separator.join(self.artists)

    def remixer_name(self, separator=" "):
        return separator.join(self.remix)

    def matches(self, other):
        return equals(self, other)

    # ── Interchange ──────────────────────────────────────────────────

    def to_dict(self):
        return {
            "name": self.name,
            "artists": list(self.artists),
            "remix": list(self.remix),
            "catno": self.catno,
            "position": self.position,
        }

    @classmethod
    def from_dict(cls, data):
        """Build a Track from a mapping with the interchange field names.

        Unknown keys (e.g. a stored "url") are ignored and missing ones
        default to empty.  A bare string in a list field is taken as one name.
        """
        return cls(
            name=data.get("name") or "",
            artists=_name_list(data.get("artists")),
            remix=_name_list(data.get("remix")),
            catno=data.get("catno") or "",
            position=data.get("position") or "",
        )

    def to_json(self):
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, text):
        return cls.from_dict(json.loads(text))


def parse(text):
    """Resolve a freeform title into a Track.

    Never raises on string input; anything the grammar cannot place is
    simply left empty.
    """
    name = ""
    artists = []
    remix = []
    catno = ""
    position = ""

    for fragment in parse_fragments(lex(text)):
        if isinstance(fragment, ArtistName):
            artists.append(fragment.text)
        elif isinstance(fragment, Remix):
            if ascii_lower(fragment.text) in DISCARDED_REMIXERS:
                continue
            remix.append(fragment.text)
        elif isinstance(fragment, TrackName):
            name = fragment.text
        elif isinstance(fragment, TrackSide):
            position = fragment.text
        elif isinstance(fragment, Label):
            catno = fragment.text

    return Track(name=name, artists=artists, remix=remix,
                 catno=catno, position=position)


def _contains_all(needles, haystack):
    """Every needle has a case-insensitive match somewhere in haystack."""
    lowered = {ascii_lower(h) for h in haystack}
    return all(ascii_lower(n) in lowered for n in needles)


def equals(a, b):
    """Whether two Tracks denote the same recording.

    Name, artists and remixers are compared case-insensitively; catalog
    number and position are ignored.  Artist and remixer counts must
    agree, then every entry of ``a`` must appear in ``b``.
    """
    if len(a.artists) != len(b.artists):
        return False
    if len(a.remix) != len(b.remix):
        return False
    if ascii_lower(a.name) != ascii_lower(b.name):
        return False
    return _contains_all(a.artists, b.artists) and _contains_all(a.remix, b.remix)
