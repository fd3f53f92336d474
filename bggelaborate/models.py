"""Board game records and parsers for the BoardGameGeek XML API."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, fields


@dataclass(frozen=True)
class Boardgame:
    """Details of one board game as returned by the boardgame endpoint."""

    objectid: int
    minplayers: int
    maxplayers: int
    playingtime: int
    minplaytime: int
    maxplaytime: int
    age: int


@dataclass(frozen=True)
class BoardgameOverview:
    """One hit of a keyword search: the game's id and its name."""

    objectid: int
    name: str


def _parse_root(text: str) -> ET.Element:
    try:
        return ET.fromstring(text)
    except ET.ParseError as exc:
        raise ValueError(f"invalid XML: {exc}") from exc


def _parse_int(value: str | None, what: str) -> int:
    if value is None:
        raise ValueError(f"missing {what}")
    try:
        return int(value.strip())
    except ValueError as exc:
        raise ValueError(f"{what} is not an integer: {value!r}") from exc


def _object_id(element: ET.Element) -> int:
    return _parse_int(element.get("objectid"), "attribute objectid")


def parse_boardgame(text: str) -> Boardgame:
    """Parse the response of the boardgame endpoint into a Boardgame.

    Raises ValueError if the document is malformed or a field is missing.
    """
    root = _parse_root(text)
    element = root.find("boardgame")
    if element is None:
        raise ValueError("missing field boardgame")
    values = {"objectid": _object_id(element)}
    for field in fields(Boardgame):
        if field.name == "objectid":
            continue
        child = element.find(field.name)
        values[field.name] = _parse_int(
            None if child is None else (child.text or ""), f"field {field.name}"
        )
    return Boardgame(**values)


def parse_search_results(text: str) -> list[BoardgameOverview]:
    """Parse the response of the search endpoint, keeping document order.

    Raises ValueError if the document is malformed or an entry lacks a name.
    """
    root = _parse_root(text)
    results = []
    for element in root.findall("boardgame"):
        name = element.find("name")
        if name is None:
            raise ValueError("missing field name")
        results.append(BoardgameOverview(_object_id(element), name.text or ""))
    return results