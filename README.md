# bggelaborate

A small command-line tool that reads a CSV of board game titles and writes
`out.csv` with information looked up on BoardGameGeek: the best-matching
title found there, minimum and maximum players, playing time, minimum and
maximum play time, and minimum age.

## Installation

```
pip install .
```

## Usage

The input CSV is read from standard input. Its first line is a header and
is skipped, as are empty rows. The output is always written to `out.csv` in
the current directory (an existing file is overwritten), with these columns:

```
title,foundtitle,minplayers,maxplayers,playingtime,minplaytime,maxplaytime,age
```

Numbers that BoardGameGeek reports as `0` are left blank. When no game can
be found, or a request or its response fails, `foundtitle` is `NOT_FOUND`
and the other columns are empty. Each row is flushed to the file as soon as
it is written, and progress ("searching for name ...", "found game ...",
"score is ...", "searching for id ...") is printed to standard output.

### Elaborate a list of titles

The default mode reads one title per row from the first column and looks
each one up:

```
bggelaborate < games.csv
bggelaborate --mode elaborate < games.csv
```

### Expand a previous result

The `expand` mode takes a file written earlier by the tool and looks up
only the rows whose `foundtitle` is empty or `NOT_FOUND`. Every other row
is copied through with its first eight columns. A row with fewer than two
columns, or a copied row with fewer than eight, stops the run with a
`ValueError`. This lets you fix titles by hand and then run the tool again:

```
cp out.csv previous.csv
bggelaborate --mode expand < previous.csv
```

Short form: `-m expand`.

## How matching works

A title search on BoardGameGeek returns many candidates. Each candidate
name is cut to the length of the searched title, counted in UTF-8 bytes;
both are lower cased and scored with a fuzzy subsequence match
(`bggelaborate.matching.fuzzy_score`), in which characters at word starts and
runs of consecutive characters earn bonuses and gaps cost points. The
top-scoring candidate is kept; ties keep the order of the search results,
and a candidate that does not match at all scores 0.

## Using it from Python

- `bggelaborate.models` holds the `Boardgame` and `BoardgameOverview`
  dataclasses and the parsers `parse_boardgame(text)` and
  `parse_search_results(text)`, which raise `ValueError` on malformed XML or
  missing fields.
- `bggelaborate.matching.find_best_boardgame(name, games)` returns the best
  hit and its score; it raises `ValueError` for an empty list.
- `bggelaborate.client.BggClient(session=None, base_url=...)` offers
  `fetch(url)`, `search_best(name)`, `get_boardgame(object_id)` and
  `get_boardgame_by_name(name)`; each returns `None` instead of raising
  when a lookup fails.
- `bggelaborate.cli` provides `build_row`, and the generators `elaborate`
  and `expand`, which take rows and a client and yield output rows.

## Limitations

The output file name is fixed, requests go out one at a time with no
caching, retrying or rate limiting, and only the fields listed above are
read from BoardGameGeek.

## Running the tests

```
pip install .[test]
pytest
```