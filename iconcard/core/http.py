import asyncio
import logging
from typing import Optional, Protocol
from urllib.error import HTTPError
from urllib.request import urlopen

from .config import Config


logger = logging.getLogger(__name__)


class HttpFetchError(Exception):
    """Outbound GET failed: connection error, timeout or non-2xx status."""

    def __init__(self, url: str, status: Optional[int] = None, cause: Optional[BaseException] = None):
        self.url = url
        self.status = status
        self.cause = cause
        detail = f"status {status}" if status is not None else str(cause)
        super().__init__(f"GET {url} failed: {detail}")


class Fetcher(Protocol):
    """Anything that can perform an HTTP GET and hand back the body as text."""

    async def get(self, url: str) -> str:
        ...


def download_text_from_url(url: str, timeout_seconds: float = 10, encoding: str = "utf-8") -> str:
    try:
        with urlopen(url, timeout=timeout_seconds) as resp:
            status = getattr(resp, "status", 200)
            if not 200 <= status < 300:
                logger.error(f"Failed to download {url}: HTTP {status}")
                raise HttpFetchError(url, status=status)
            body = resp.read()

        return body.decode(encoding)
    except HttpFetchError:
        raise
    except HTTPError as e:
        logger.error(f"Failed to download {url}: HTTP {e.code}")
        raise HttpFetchError(url, status=e.code, cause=e) from e
    except Exception as e:
        logger.error(f"Failed to download {url}: {str(e)}")
        raise HttpFetchError(url, cause=e) from e


class UrllibFetcher:
    """Default fetcher: blocking urlopen pushed onto the default thread pool."""

    def __init__(self, timeout_seconds: Optional[float] = None):
        self.timeout_seconds = timeout_seconds if timeout_seconds is not None else Config.FETCH_TIMEOUT_SECONDS

    async def get(self, url: str) -> str:
        return await asyncio.to_thread(download_text_from_url, url, self.timeout_seconds)
