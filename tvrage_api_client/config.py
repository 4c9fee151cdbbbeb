"""Configuration for TVRage API client."""

import os

TVRAGE_API_BASE_URL = os.getenv('TVRAGE_API_BASE_URL', 'http://services.tvrage.com/myfeeds/')
TVRAGE_API_TIMEOUT = float(os.getenv('TVRAGE_API_TIMEOUT', 30))
TVRAGE_API_POOL_MAXSIZE = int(os.getenv('TVRAGE_API_POOL_MAXSIZE', 10))
