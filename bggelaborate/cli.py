"""Command line tool that fills a CSV of board game titles with game details."""

from __future__ import annotations

import argparse
import csv
import sys
from typing import Iterable, Iterator, Sequence

import requests

from .client import BggClient
from .models import Boardgame

OUTPUT_FILE = "out.csv"
NOT_FOUND = "NOT_FOUND"
HEADER = [
    "title",
    "foundtitle",
    "minplayers",
    "maxplayers",
    "playingtime",
    "minplaytime",
    "maxplaytime",
    "age",
]
_DETAIL_FIELDS = HEADER[2:]


def build_row(title: str, found_title: str | None, game: Boardgame | None) -> list[str]:
    """Build one output row; zero values become empty cells.

    Without a game the row is marked NOT_FOUND.
    """
    if game is None or found_title is None:
        return [title, NOT_FOUND, *([""] * len(_DETAIL_FIELDS))]
    details = [getattr(game, name) for name in _DETAIL_FIELDS]
    return [title, found_title, *(str(value) if value else "" for value in details)]


def _look_up(title: str, client: BggClient) -> list[str]:
    result = client.get_boardgame_by_name(title)
    if result is None:
        return build_row(title, None, None)
    overview, game = result
    return build_row(title, overview.name, game)


def elaborate(rows: Iterable[Sequence[str]], client: BggClient) -> Iterator[list[str]]:
    """Look up the title in the first column of every row."""
    for record in rows:
        if not record:
            continue
        yield _look_up(record[0], client)


def expand(rows: Iterable[Sequence[str]], client: BggClient) -> Iterator[list[str]]:
    """Look up only the rows of an earlier output that have no found title."""
    for record in rows:
        if not record:
            continue
        if len(record) < 2:
            raise ValueError(f"row has no found title: {list(record)!r}")
        title, found_title = record[0], record[1]
        if found_title in ("", NOT_FOUND):
            yield _look_up(title, client)
        else:
            if len(record) < len(HEADER):
                raise ValueError(f"row has too few fields: {list(record)!r}")
            yield list(record[: len(HEADER)])


def main(argv: Sequence[str] | None = None) -> int:
    """Read titles as CSV from standard input and write the results to out.csv."""
    print("Welcome to bggelaborate!")
    parser = argparse.ArgumentParser(
        prog="bggelaborate",
        description="Fill a CSV of board game titles with details from BoardGameGeek.",
    )
    parser.add_argument(
        "-m",
        "--mode",
        choices=("elaborate", "expand"),
        default="elaborate",
        help="elaborate a list of titles, or expand an earlier output",
    )
    args = parser.parse_args(argv)
    process = elaborate if args.mode == "elaborate" else expand

    reader = csv.reader(sys.stdin)
    next(reader, None)
    with requests.Session() as session, open(
        OUTPUT_FILE, "w", newline="", encoding="utf-8"
    ) as out:
        writer = csv.writer(out, lineterminator="\n")
        writer.writerow(HEADER)
        for row in process(reader, BggClient(session)):
            writer.writerow(row)
            out.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())