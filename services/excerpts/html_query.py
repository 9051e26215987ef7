# services/excerpts/html_query.py
"""
The ``htmlQuery`` strategy: pull an excerpt out of an HTML field with CSS
selectors.

Pipeline (all selectors are soupsieve CSS selectors, run through
``BeautifulSoup.select``):

1. move every element matching ``excerpt_selector`` (default: every top‑level
   element of the body) into a fresh container, in document order;
2. drop ``ignore_selector`` matches together with their subtree;
3. unwrap ``strip_selector`` matches (children stay where the tag was);
4. rename elements per ``element_replacements``, rule by rule;
5. give up when nothing is left, otherwise truncate if asked to.

Every step queries the container as it is *after* the previous step.  In
particular replacement rules see the output of earlier rules, so
``h2 → h3`` followed by ``h3 → h4`` turns an original ``<h2>`` into ``<h4>``.
Order the rules accordingly.
"""

from typing import Any, Callable, Dict, Optional

from bs4 import BeautifulSoup, Tag
from bs4.element import PreformattedString
from loguru import logger

from models.excerpt_config import SourceConfiguration
from .output_converters import OUTPUT_CONVERTERS
from .strategies import ExcerptStrategy, registry
from .truncation import truncate_html

PARSER = "html.parser"

# Skeleton elements every parsed field sits in.
DOCUMENT_ELEMENTS = frozenset({"html", "head", "body"})


# ----------------------------------------------------------------------
# Helpers
# ----------------------------------------------------------------------
def _parse_document(html_text: str) -> BeautifulSoup:
    """
    Parse ``html_text`` into a document-shaped tree.

    ``html.parser`` keeps a fragment as is, so a field without its own
    ``<html>`` element is moved into the ``<body>`` of an
    ``<html><head></head><body>`` skeleton.  Selectors such as ``html > *``
    then match the way they do against a browser-built document.
    """
    fragment = BeautifulSoup(html_text, PARSER)
    if fragment.find("html") is not None:
        return fragment

    document = BeautifulSoup("<html><head></head><body></body></html>", PARSER)
    for node in list(fragment.contents):
        document.body.append(node.extract())
    return document


def _has_content(container: BeautifulSoup) -> bool:
    """True when the container holds a real element or some non‑blank text."""
    for node in container.descendants:
        if isinstance(node, Tag):
            if node.name not in DOCUMENT_ELEMENTS:
                return True
        elif not isinstance(node, PreformattedString) and node.strip():
            return True
    return False


def _select_into(soup: BeautifulSoup, selector: Optional[str], container: BeautifulSoup) -> None:
    """Move the selected elements out of ``soup`` and into ``container``."""
    if selector:
        matches = soup.select(selector)
    else:
        root = soup.body or soup.html or soup
        matches = root.find_all(True, recursive=False)

    for element in matches:
        # Already carried over inside an earlier (ancestor) match.
        if any(parent is container for parent in element.parents):
            continue
        container.append(element.extract())


# ----------------------------------------------------------------------
# Extraction
# ----------------------------------------------------------------------
def extract_fragment(html_text: str, settings: SourceConfiguration) -> Optional[BeautifulSoup]:
    """
    Run the query described by ``settings`` against ``html_text``.

    Returns a detached BeautifulSoup document holding the excerpt, or ``None``
    when nothing survives selection and pruning.
    """
    soup = _parse_document(html_text)
    container = BeautifulSoup("", PARSER)

    _select_into(soup, settings.excerpt_selector, container)

    if settings.ignore_selector:
        for element in container.select(settings.ignore_selector):
            element.extract()

    if settings.strip_selector:
        for element in container.select(settings.strip_selector):
            element.unwrap()

    for rule in settings.element_replacements:
        for element in container.select(rule.selector):
            element.name = rule.replace_with

    if not _has_content(container):
        return None

    if settings.truncate is not None:
        truncated = truncate_html(container.decode_contents(), settings.truncate)
        container = BeautifulSoup(truncated, PARSER)

    return container


# ----------------------------------------------------------------------
# Strategy
# ----------------------------------------------------------------------
@registry.register
class HtmlQueryStrategy(ExcerptStrategy):
    """Excerpt strategy backed by ``extract_fragment``."""

    type_tag = "htmlQuery"

    def search(self, field_value: Any) -> Optional[BeautifulSoup]:
        if not isinstance(field_value, str):
            logger.warning(
                f"htmlQuery source on field '{self.settings.source_field}' expects HTML text, "
                f"got {type(field_value).__name__} – skipping"
            )
            return None
        return extract_fragment(field_value, self.settings)

    @property
    def output_converters(self) -> Dict[str, Callable[[BeautifulSoup], str]]:
        return OUTPUT_CONVERTERS
