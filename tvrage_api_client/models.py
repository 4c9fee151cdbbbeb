"""Typed records returned by the TVRage API client.

Every field has a default, so constructing a model with no arguments gives the
empty instance that lookups return instead of None.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional

UNKNOWN = "UNKNOWN"


def is_valid_string(value: Optional[str]) -> bool:
    """Check the string passed to see if it contains a value.

    Args:
        value: The string to test

    Returns:
        False if the string is None, blank or "UNKNOWN" (any case), True otherwise
    """
    if value is None or not value.strip():
        return False
    return value.upper() != UNKNOWN


def clean_text(value: Optional[str]) -> str:
    """Return the value unchanged, or "" when it is None, blank or "UNKNOWN"."""
    return value if is_valid_string(value) else ""


@dataclass
class CountryDetail:
    """A value tied to a country, such as a network or an alternative title."""
    country: str = ""
    detail: str = ""


@dataclass
class ShowInfo:
    """Information about a single show."""
    show_id: int = 0
    show_name: str = ""
    show_link: str = ""
    country: str = ""
    started: str = ""
    start_date: str = ""
    ended: str = ""
    status: str = ""
    classification: str = ""
    runtime: str = ""
    air_time: str = ""
    air_day: str = ""
    timezone: str = ""
    total_seasons: int = 0
    genres: List[str] = field(default_factory=list)
    networks: List[CountryDetail] = field(default_factory=list)
    akas: List[CountryDetail] = field(default_factory=list)

    def is_valid(self) -> bool:
        return self.show_id > 0


@dataclass
class Episode:
    """A single episode of a show."""
    show_id: int = 0
    show_name: str = ""
    season: int = 0
    episode: int = 0
    absolute_number: int = 0
    title: str = ""
    air_date: str = ""
    link: str = ""
    production_id: str = ""
    summary: str = ""
    rating: str = ""
    screen_cap: str = ""

    def is_valid(self) -> bool:
        # Specials are listed under season 0
        return self.season >= 0 and self.episode > 0 and bool(self.title or self.air_date)


@dataclass
class EpisodeList:
    """All the episodes of one show, in the order the service lists them."""
    show_name: str = ""
    total_seasons: int = 0
    episodes: List[Episode] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.episodes)

    def __iter__(self) -> Iterator[Episode]:
        return iter(self.episodes)

    @property
    def season_numbers(self) -> List[int]:
        """Distinct season numbers in the order they first appear."""
        seen = []
        for ep in self.episodes:
            if ep.season not in seen:
                seen.append(ep.season)
        return seen

    def get_season(self, season: int) -> List[Episode]:
        return [ep for ep in self.episodes if ep.season == season]

    def get_episode(self, season: int, episode: int) -> Episode:
        """Return the matching episode, or an empty Episode if the list has none."""
        for ep in self.episodes:
            if ep.season == season and ep.episode == episode:
                return ep
        return Episode()

    def is_valid(self) -> bool:
        return bool(self.episodes)
