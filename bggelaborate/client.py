"""HTTP client for the BoardGameGeek XML API."""

from __future__ import annotations

from urllib.parse import quote

import requests

from .matching import find_best_boardgame
from .models import (
    Boardgame,
    BoardgameOverview,
    parse_boardgame,
    parse_search_results,
)

BASE_URL = "https://boardgamegeek.com/xmlapi"
USER_AGENT = "andromeda-boardgame-info-finder"


class BggClient:
    """Looks up board games by name or id."""

    def __init__(self, session: requests.Session | None = None, base_url: str = BASE_URL):
        self.session = session if session is not None else requests.Session()
        self.base_url = base_url.rstrip("/")

    def fetch(self, url: str) -> str | None:
        """Return the body of a GET request, or None if the request fails."""
        try:
            response = self.session.get(url, headers={"User-Agent": USER_AGENT})
            return response.text
        except requests.RequestException:
            return None

    def search_best(self, name: str) -> BoardgameOverview | None:
        """Search for ``name`` and return the best matching hit, if any."""
        print(f"searching for name {name}")
        url = f"{self.base_url}/search?search={quote(name, safe='')}"
        text = self.fetch(url) or ""
        try:
            games = parse_search_results(text)
        except ValueError:
            return None
        if not games:
            return None
        best, score = find_best_boardgame(name, games)
        print(f"found game {best.name}")
        print(f"score is {score}")
        return best

    def get_boardgame(self, object_id: int) -> Boardgame | None:
        """Fetch the details of the game with ``object_id``, if available."""
        print(f"searching for id {object_id}")
        text = self.fetch(f"{self.base_url}/boardgame/{object_id}/") or ""
        try:
            return parse_boardgame(text)
        except ValueError:
            return None

    def get_boardgame_by_name(
        self, name: str
    ) -> tuple[BoardgameOverview, Boardgame] | None:
        """Find the best hit for ``name`` and return it with the game's details."""
        overview = self.search_best(name)
        if overview is None:
            return None
        game = self.get_boardgame(overview.objectid)
        if game is None:
            return None
        return overview, game