"""Token tables, patterns, and source-specific constants."""

import re
from types import MappingProxyType

# ── Track side ────────────────────────────────────────────────────────
# Vinyl face + slot: one letter, one digit 1-9 ("A1", "B2").  "A0" is not
# a side.
TRACK_SIDE_PATTERN = re.compile(r"^[a-zA-Z][1-9]$")

# ── Lexer tables ──────────────────────────────────────────────────────
# Single characters that always form a token of their own.  Both "&" and
# "," join names, so they share a token type.
SINGLE_CHAR_TOKENS = MappingProxyType({
    "(": "LEFT_PAREN",
    ")": "RIGHT_PAREN",
    "[": "LEFT_BRACKET",
    "]": "RIGHT_BRACKET",
    "&": "AND",
    ",": "AND",
    "-": "MINUS",
    "+": "PLUS",
    ":": "COLUMN",
    ".": "DOT",
})

WHITESPACE = frozenset({" ", "\t"})

# Case-sensitive: "REMIX" stays a literal.
KEYWORDS = MappingProxyType({
    "remix": "MIX",
    "Remix": "MIX",
    "mix": "MIX",
    "Mix": "MIX",
    "instrumental": "MIX",
    "instr.": "MIX",
    "reconstruction": "MIX",
    "Reconstruction": "MIX",
    "feat": "FEAT",
    "feat.": "FEAT",
})

# ── Normalization ─────────────────────────────────────────────────────
# "(Original Mix)" names a version, not a remixer.
DISCARDED_REMIXERS = frozenset({"original"})

# ── Catalog (release database) ────────────────────────────────────────
# Credit names carry a numeric suffix when several artists share a name:
# "Barac (2)".
CREDIT_SUFFIX_PATTERN = re.compile(r"\([0-9]+\)")
REMIX_ROLE_KEYWORD = "remix"
CATALOG_TITLE_PREFIX = "a - "  # dummy artist so the title parses as a name

# ── Beatport ──────────────────────────────────────────────────────────
BEATPORT_ARTIST_TYPE = "artist"
BEATPORT_REMIXER_TYPE = "remixer"
BEATPORT_NAME_SEPARATOR = " - "
