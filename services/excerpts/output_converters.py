# services/excerpts/output_converters.py
"""Serialize an extracted fragment into one of the supported output kinds."""

from typing import Callable, Dict

from bs4 import BeautifulSoup


def to_html(fragment: BeautifulSoup) -> str:
    """Inner markup of the fragment (its children, serialized back to back)."""
    return fragment.decode_contents()


def to_text(fragment: BeautifulSoup) -> str:
    """Text content of the fragment with every tag stripped."""
    return fragment.get_text()


OUTPUT_CONVERTERS: Dict[str, Callable[[BeautifulSoup], str]] = {
    "html": to_html,
    "text": to_text,
}
