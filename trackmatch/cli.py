"""CLI for resolving and matching track titles."""

import argparse
import json
import logging
import sys

from trackmatch.sources import (
    match_tracklist,
    track_from_beatport,
    tracks_from_bandcamp_album,
    tracks_from_release,
)
from trackmatch.track import equals, parse


def _load_json(path):
    """Read a JSON file, exiting with status 2 if it can't be read."""
    try:
        with open(path) as f:
            return json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        print(f"ERROR: cannot read {path}: {e}", file=sys.stderr)
        sys.exit(2)


def _candidates(data, source):
    """Convert a candidates file into Tracks.

    beatport:  list of search result entries
    bandcamp:  album page data with "artist" and "trackinfo"
    titles:    list of plain "Artist - Title" strings
    """
    if source == "beatport":
        return [track_from_beatport(entry) for entry in data]
    if source == "bandcamp":
        return tracks_from_bandcamp_album(data)
    return [parse(title) for title in data]


def cmd_parse(args):
    """Print each title resolved to a Track."""
    for title in args.titles:
        print(parse(title).to_json())


def cmd_match(args):
    """Compare two titles; exit status 0 on a match."""
    a = parse(args.title_a)
    b = parse(args.title_b)
    if equals(a, b):
        print("match")
        return
    print("no match")
    print(f"  a: {a.to_json()}")
    print(f"  b: {b.to_json()}")
    sys.exit(1)


def cmd_resolve(args):
    """Match every track of a catalog release against a candidates file."""
    release = _load_json(args.release)
    targets = tracks_from_release(release)
    if not targets:
        print("Release has no tracklist.")
        return

    candidates = _candidates(_load_json(args.candidates), args.source)
    results = match_tracklist(targets, candidates)

    for target, found in zip(targets, results):
        label = f"{target.artist_name(', ')} - {target.name}"
        if target.remix:
            label += f" ({target.remixer_name(' & ')} Remix)"
        match = found.to_json() if found is not None else "-"
        print(f"  {target.position or '?':4s} {label}")
        print(f"       → {match}")

    found = sum(1 for r in results if r is not None)
    print(f"Matched {found}/{len(targets)} tracks")


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="trackmatch",
        description="Resolve freeform track titles and match them across sources",
    )
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log every candidate comparison")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # parse
    p_parse = subparsers.add_parser("parse", help="Resolve titles to structured tracks")
    p_parse.add_argument("titles", nargs="+", metavar="TITLE")
    p_parse.set_defaults(func=cmd_parse)

    # match
    p_match = subparsers.add_parser("match", help="Check whether two titles are the same track")
    p_match.add_argument("title_a", metavar="TITLE_A")
    p_match.add_argument("title_b", metavar="TITLE_B")
    p_match.set_defaults(func=cmd_match)

    # resolve
    p_resolve = subparsers.add_parser("resolve",
                                      help="Match a catalog release against candidates")
    p_resolve.add_argument("release", help="Catalog release JSON file")
    p_resolve.add_argument("candidates", help="Candidates JSON file")
    p_resolve.add_argument("--source", choices=["beatport", "bandcamp", "titles"],
                           default="titles",
                           help="Format of the candidates file (default: titles)")
    p_resolve.set_defaults(func=cmd_resolve)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if not args.command:
        parser.print_help()
        sys.exit(1)

    args.func(args)
