import pytest

from bggelaborate.models import (
    Boardgame,
    BoardgameOverview,
    parse_boardgame,
    parse_search_results,
)

GAME_XML = """<?xml version="1.0" encoding="utf-8"?>
<boardgames>
  <boardgame objectid="13">
    <yearpublished>1995</yearpublished>
    <minplayers>3</minplayers>
    <maxplayers>4</maxplayers>
    <playingtime>120</playingtime>
    <minplaytime>60</minplaytime>
    <maxplaytime>120</maxplaytime>
    <age>10</age>
    <name primary="true">Catan</name>
  </boardgame>
</boardgames>
"""

SEARCH_XML = """<boardgames>
  <boardgame objectid="13"><name primary="true">Catan</name></boardgame>
  <boardgame objectid="926"><name primary="true">Catan: Seafarers</name></boardgame>
</boardgames>
"""


def test_parse_boardgame_reads_all_fields():
    game = parse_boardgame(GAME_XML)
    assert game == Boardgame(
        objectid=13,
        minplayers=3,
        maxplayers=4,
        playingtime=120,
        minplaytime=60,
        maxplaytime=120,
        age=10,
    )


def test_parse_boardgame_missing_field():
    broken = GAME_XML.replace("<age>10</age>", "")
    with pytest.raises(ValueError):
        parse_boardgame(broken)


def test_parse_boardgame_non_integer():
    broken = GAME_XML.replace("<age>10</age>", "<age>ten</age>")
    with pytest.raises(ValueError):
        parse_boardgame(broken)


def test_parse_boardgame_empty_text():
    with pytest.raises(ValueError):
        parse_boardgame("")


def test_parse_boardgame_without_game_element():
    with pytest.raises(ValueError):
        parse_boardgame("<boardgames></boardgames>")


def test_parse_search_results_keeps_order():
    results = parse_search_results(SEARCH_XML)
    assert results == [
        BoardgameOverview(13, "Catan"),
        BoardgameOverview(926, "Catan: Seafarers"),
    ]


def test_parse_search_results_empty():
    assert parse_search_results("<boardgames></boardgames>") == []


def test_parse_search_results_missing_name():
    with pytest.raises(ValueError):
        parse_search_results('<boardgames><boardgame objectid="1"/></boardgames>')


def test_parse_search_results_malformed():
    with pytest.raises(ValueError):
        parse_search_results("<boardgames>")