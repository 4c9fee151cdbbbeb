"""Client for the TVRage API."""

from .tvrage_api import TVRageAPI
from .models import CountryDetail, Episode, EpisodeList, ShowInfo, UNKNOWN, is_valid_string
from .exceptions import ConfigurationError, ParseError, TransportError, TVRageError, UnknownOperationError

__all__ = [
    'TVRageAPI',
    'CountryDetail',
    'Episode',
    'EpisodeList',
    'ShowInfo',
    'UNKNOWN',
    'is_valid_string',
    'TVRageError',
    'ConfigurationError',
    'TransportError',
    'ParseError',
    'UnknownOperationError',
]
