"""Page retrieval for the local SEO analyzer."""

import logging
from dataclasses import dataclass

import httpx

from analyzers.base import FetchError
from config import Settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FetchedPage:
    """A successfully retrieved page."""

    url: str  # Final URL after redirects
    status_code: int
    html: str


def normalize_url(url: str) -> str:
    """Trim the URL and default the scheme to https."""
    url = url.strip()
    if not url.lower().startswith(("http://", "https://")):
        url = f"https://{url}"
    return url


class PageFetcher:
    """Fetches a single page with bounded timeout and redirects."""

    def __init__(
        self,
        settings: Settings,
        transport: httpx.BaseTransport | None = None,
    ):
        self.settings = settings
        self.transport = transport

    def fetch(self, url: str, timeout: float | None = None) -> FetchedPage:
        """
        Fetch page HTML.

        Args:
            url: URL to fetch, scheme optional
            timeout: Override for the configured timeout, in seconds

        Returns:
            FetchedPage with the final URL and body text

        Raises:
            FetchError: On timeout, network failure or non-2xx status
        """
        url = normalize_url(url)
        timeout = self.settings.http_timeout if timeout is None else timeout

        try:
            with httpx.Client(
                timeout=timeout,
                follow_redirects=True,
                max_redirects=self.settings.max_redirects,
                headers={"User-Agent": self.settings.user_agent},
                transport=self.transport,
            ) as client:
                response = client.get(url)
                response.raise_for_status()
                return FetchedPage(
                    url=str(response.url),
                    status_code=response.status_code,
                    html=response.text,
                )

        except httpx.TimeoutException:
            logger.warning(f"Timeout fetching {url}")
            raise FetchError(f"Timed out fetching {url} after {timeout:g}s")

        except httpx.TooManyRedirects:
            logger.warning(f"Too many redirects fetching {url}")
            raise FetchError(f"Too many redirects fetching {url}")

        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.warning(f"HTTP {status} fetching {url}")
            raise FetchError(f"HTTP {status} fetching {url}")

        except httpx.InvalidURL as e:
            raise FetchError(f"Invalid URL {url}: {e}")

        except httpx.HTTPError as e:
            logger.warning(f"Failed to fetch {url}: {e}")
            raise FetchError(f"Failed to fetch {url}: {e}")
