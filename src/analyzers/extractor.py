"""HTML extraction of the on-page fields the checks need."""

import logging
import re
from dataclasses import dataclass

from bs4 import BeautifulSoup

from analyzers.base import ParseError

logger = logging.getLogger(__name__)

# Elements whose text never counts as page content
NON_CONTENT_TAGS = ["script", "style", "noscript", "template"]


@dataclass(frozen=True)
class PageContent:
    """Fields extracted from page markup."""

    title: str = ""
    meta_description: str = ""
    h1s: tuple[str, ...] = ()
    image_count: int = 0
    images_with_alt: int = 0
    word_count: int = 0


def extract_page_content(html: str) -> PageContent:
    """
    Extract title, meta description, H1s, image and word counts.

    Malformed or empty markup never raises; the affected fields come back
    empty instead.
    """
    try:
        return _extract(html)
    except ParseError as e:
        logger.warning(f"Falling back to empty page content: {e}")
        return PageContent()


def _extract(html: str) -> PageContent:
    try:
        soup = BeautifulSoup(html or "", "lxml")
    except Exception as e:
        raise ParseError(f"Could not parse markup: {e}") from e

    images = soup.find_all("img")
    with_alt = sum(1 for img in images if (img.get("alt") or "").strip())

    return PageContent(
        title=_get_title(soup),
        meta_description=_get_meta_description(soup),
        h1s=tuple(h1.get_text(" ", strip=True) for h1 in soup.find_all("h1")),
        image_count=len(images),
        images_with_alt=with_alt,
        word_count=_count_words(soup),
    )


def _get_title(soup: BeautifulSoup) -> str:
    title_tag = soup.find("title")
    return title_tag.get_text(strip=True) if title_tag else ""


def _get_meta_description(soup: BeautifulSoup) -> str:
    meta_desc = soup.find("meta", attrs={"name": re.compile(r"^description$", re.I)})
    if not meta_desc:
        return ""
    return (meta_desc.get("content") or "").strip()


def _count_words(soup: BeautifulSoup) -> int:
    """Count whitespace-separated words in the visible body text."""
    body = soup.find("body")
    if body is None:
        body = soup
    for tag in body.find_all(NON_CONTENT_TAGS):
        tag.decompose()
    return len(body.get_text(" ", strip=True).split())
