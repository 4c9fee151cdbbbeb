"""TVRage API Client with connection pooling and XML response mapping."""

import logging  # Keep for default logger
from logging import Logger
from typing import Any, Callable, List, Optional, TypeVar, Union
from urllib.parse import quote

import requests
from requests.adapters import HTTPAdapter

from . import config
from .exceptions import ConfigurationError, ParseError, TransportError, UnknownOperationError
from .models import Episode, EpisodeList, ShowInfo, is_valid_string
from .parser import parse_episode_info, parse_episode_list, parse_search_results, parse_show_info

T = TypeVar('T')

API_EPISODE_INFO = 'episodeinfo.php'
API_EPISODE_LIST = 'episode_list.php'
API_SEARCH = 'search.php'
API_SHOWINFO = 'showinfo.php'

# Query parameter carrying the caller's data for each feed
OPERATION_PARAMETERS = {
    API_SEARCH: 'show',
    API_SHOWINFO: 'sid',
    API_EPISODE_LIST: 'sid',
    API_EPISODE_INFO: 'sid',
}

OPERATION_ALIASES = {
    'search': API_SEARCH,
    'show-info': API_SHOWINFO,
    'episode-list': API_EPISODE_LIST,
    'episode-info': API_EPISODE_INFO,
}


class TVRageAPI:
    """Client for the TVRage XML feeds.

    Every lookup makes at most one blocking request. Invalid identifiers never
    raise: they short-circuit to an empty model (or an empty list for searches)
    without touching the network. Failures after that point raise
    TransportError or ParseError.

    The client holds no mutable state of its own. Sharing one instance between
    threads is only as safe as the session it was given.
    """

    is_valid_string = staticmethod(is_valid_string)

    def __init__(self, api_key: str, session: Optional[requests.Session] = None,
                 logger: Optional[Logger] = None):
        """Initializes the API client.

        Args:
            api_key: TVRage API key, must not be blank
            session: HTTP client used for GET requests; any object with a
                requests.Session compatible get(url, timeout=...). A pooled
                session is created when omitted.
            logger: Optional logger instance

        Raises:
            ConfigurationError: If the API key is missing or blank
        """
        if not isinstance(api_key, str) or not api_key.strip():
            raise ConfigurationError("No API Key provided!")

        self.logger = logger or logging.getLogger(__name__)
        self.api_key = api_key
        self.base_url: str = config.TVRAGE_API_BASE_URL.rstrip('/')
        self.timeout: float = config.TVRAGE_API_TIMEOUT
        self.session = session if session is not None else self._build_session()

        self.logger.info(f"TVRageAPI initialized: base_url={self.base_url}")

    @staticmethod
    def _build_session() -> requests.Session:
        """Creates the default session with a pooled adapter for http and https."""
        pool_size = config.TVRAGE_API_POOL_MAXSIZE
        adapter = HTTPAdapter(pool_connections=pool_size, pool_maxsize=pool_size)
        session = requests.Session()
        session.mount("https://", adapter)
        session.mount("http://", adapter)
        return session

    def build_url(self, operation: str, data: Any) -> str:
        """Build the feed URL for an operation.

        Args:
            operation: Feed path (e.g. 'search.php') or name (e.g. 'search'), any case
            data: Search text for 'search', the show ID for every other feed

        Returns:
            The URL, without the '&ep=' suffix that episode info lookups add

        Raises:
            UnknownOperationError: If the operation is not one of the TVRage feeds
        """
        key = str(operation).lower()
        path = OPERATION_ALIASES.get(key, key)
        if path not in OPERATION_PARAMETERS:
            self.logger.error(f"Unknown operation '{operation}'. Use one of {sorted(OPERATION_PARAMETERS)}.")
            raise UnknownOperationError(f"Unknown operation '{operation}'", operation=str(operation))

        value = quote(str(data)) if path == API_SEARCH else str(data)
        url = f"{self.base_url}/{path}?key={self.api_key}&{OPERATION_PARAMETERS[path]}={value}"
        self.logger.debug(f"Search URL: {url}")
        return url

    def _make_request(self, operation: str, url: str) -> str:
        """Makes a GET request and returns the response body."""
        self.logger.debug(f"Making API request: GET {url}")
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.RequestException as req_err:
            response = getattr(req_err, 'response', None)
            status_code = response.status_code if response is not None else None
            self.logger.error(f"API request failed for {operation}: {req_err}")
            raise TransportError(str(req_err), operation=operation, status_code=status_code) from req_err
        return response.text

    def _fetch(self, operation: str, url: str, parse: Callable[[str], T]) -> T:
        """Requests the URL and maps the body with the given parser."""
        text = self._make_request(operation, url)
        try:
            return parse(text)
        except ParseError as parse_err:
            parse_err.operation = operation
            self.logger.error(
                f"Failed to parse XML from {operation}: {parse_err.message}. Response text: {text[:200]}...")
            raise

    def get_show_info(self, show_id: Union[int, str, None]) -> ShowInfo:
        """
        Fetches the information for a show.

        Args:
            show_id: Numeric show ID, as an int or a string.

        Returns:
            The ShowInfo, or an empty ShowInfo if the ID is not a positive
            number or the service knows no such show.
        """
        if isinstance(show_id, str):
            try:
                show_id = int(show_id.strip())
            except ValueError:
                self.logger.debug(f"Ignoring non-numeric show ID {show_id!r}.")
                return ShowInfo()

        if isinstance(show_id, bool) or not isinstance(show_id, int):
            self.logger.debug(f"Ignoring show ID {show_id!r} that is not a whole number.")
            return ShowInfo()

        if show_id <= 0:
            self.logger.debug(f"Ignoring non-positive show ID {show_id}.")
            return ShowInfo()

        self.logger.info(f"Fetching show info for show ID {show_id}.")
        url = self.build_url(API_SHOWINFO, show_id)
        shows = self._fetch(API_SHOWINFO, url, parse_show_info)
        if not shows:
            self.logger.info(f"No show info returned for show ID {show_id}.")
            return ShowInfo()
        return shows[0]

    def get_episode_info(self, show_id: Union[int, str], season: Union[int, str],
                         episode: Union[int, str]) -> Episode:
        """Fetches a single episode of a show; an empty Episode if any argument is invalid."""
        show_id, season, episode = (_as_text(value) for value in (show_id, season, episode))
        if not (is_valid_string(show_id) and is_valid_string(season) and is_valid_string(episode)):
            return Episode()

        self.logger.info(f"Fetching episode {season}x{episode} for show ID {show_id}.")
        url = self.build_url(API_EPISODE_INFO, show_id)
        # Append the season & episode to the URL
        url += f"&ep={season}x{episode}"
        return self._fetch(API_EPISODE_INFO, url, parse_episode_info)

    def get_episode_list(self, show_id: Union[int, str]) -> EpisodeList:
        """Fetches every episode of a show; an empty EpisodeList if the ID is invalid."""
        show_id = _as_text(show_id)
        if not is_valid_string(show_id):
            return EpisodeList()

        self.logger.info(f"Fetching episode list for show ID {show_id}.")
        url = self.build_url(API_EPISODE_LIST, show_id)
        return self._fetch(API_EPISODE_LIST, url, parse_episode_list)

    def search_show(self, show_name: Union[int, str, None]) -> List[ShowInfo]:
        """Searches for shows by name; [] if the name is invalid or nothing matches."""
        show_name = _as_text(show_name)
        if not is_valid_string(show_name):
            return []

        self.logger.info(f"Searching for shows matching '{show_name}'.")
        url = self.build_url(API_SEARCH, show_name)
        return self._fetch(API_SEARCH, url, parse_search_results)


def _as_text(value: Union[int, str, None]) -> Optional[str]:
    return value if value is None or isinstance(value, str) else str(value)
