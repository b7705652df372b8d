from .core.files import get_absolute_path, get_static_file
from .core.http import Fetcher, HttpFetchError, UrllibFetcher
from .core.text import interpolate, uppercase_first
from .services.heroicons import (
    IconFetchError,
    MalformedPathError,
    get_icon,
    normalize_icon_paths,
    normalize_path,
)

__all__ = [
    "Fetcher",
    "HttpFetchError",
    "IconFetchError",
    "MalformedPathError",
    "UrllibFetcher",
    "get_absolute_path",
    "get_icon",
    "get_static_file",
    "interpolate",
    "normalize_icon_paths",
    "normalize_path",
    "uppercase_first",
]
