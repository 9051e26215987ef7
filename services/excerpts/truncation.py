# services/excerpts/truncation.py
"""
Shorten an HTML fragment to a text budget without breaking its markup.

The budget is measured over the fragment's text as a whole, not node by node:
text nodes are joined in document order, so ``un<b>believ</b>able`` is one
word, while block elements (``<p>``, ``<li>``, ...) separate the text on
either side of them.  Once the cut offset is known it is mapped back onto the
text node holding the last kept character, that node is cut (plus the
ellipsis) and everything after it is dropped.  Every element that is still
open gets closed by the serializer, so the output stays well formed.
"""

import re
from typing import List, Optional, Tuple

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PreformattedString

from models.excerpt_config import TruncateOptions

_WORD = re.compile(r"\S+")
_WORD_TAIL = re.compile(r"\S*")

# Elements whose start and end break the surrounding text into separate words.
BLOCK_ELEMENTS = frozenset(
    {
        "address", "article", "aside", "blockquote", "body", "br", "dd",
        "details", "div", "dl", "dt", "figcaption", "figure", "footer",
        "h1", "h2", "h3", "h4", "h5", "h6", "head", "header", "hr", "html",
        "li", "main", "nav", "ol", "p", "pre", "section", "summary",
        "table", "td", "th", "tr", "ul",
    }
)


class _TextIndex:
    """
    The text of a tree in document order, plus where each text node starts.

    A newline is added at block boundaries that are not already followed by
    whitespace; it belongs to no node and only serves as a word separator
    (and counts as one character in character mode).
    """

    def __init__(self, root: Tag):
        self.segments: List[Tuple[NavigableString, int]] = []
        self._parts: List[str] = []
        self._size = 0
        self._last_char = ""
        self._walk(root)
        self.text = "".join(self._parts)

    def _push(self, text: str) -> None:
        if not text:
            return
        self._parts.append(text)
        self._size += len(text)
        self._last_char = text[-1]

    def _boundary(self) -> None:
        if self._last_char and not self._last_char.isspace():
            self._push("\n")

    def _walk(self, element: Tag) -> None:
        for child in element.children:
            if isinstance(child, PreformattedString):
                # comments, doctypes, CDATA, processing instructions
                continue
            if isinstance(child, NavigableString):
                self.segments.append((child, self._size))
                self._push(str(child))
            elif isinstance(child, Tag):
                block = child.name in BLOCK_ELEMENTS
                if block:
                    self._boundary()
                self._walk(child)
                if block:
                    self._boundary()


def _cut_offset(text: str, options: TruncateOptions) -> Optional[int]:
    """
    Offset in ``text`` where the excerpt ends, or ``None`` when the whole
    text fits.  Trailing whitespace alone never counts as overflow.
    """
    if options.by_words:
        words = list(_WORD.finditer(text))
        if len(words) <= options.length:
            return None
        end = words[options.length - 1].end()
    else:
        if len(text) <= options.length:
            return None
        end = options.length
        if options.reserve_last_word and not text[end - 1].isspace():
            end = _WORD_TAIL.match(text, end).end()

    if not text[end:].strip():
        return None
    return end


def truncate_html(markup: str, options: TruncateOptions) -> str:
    """
    Truncate ``markup`` to ``options.length`` characters (or words with
    ``by_words``) of text content.  Markup that already fits is returned
    re‑serialized but otherwise unchanged.
    """
    soup = BeautifulSoup(markup, "html.parser")
    index = _TextIndex(soup)
    end = _cut_offset(index.text, options)
    if end is None:
        return soup.decode()

    # Last text node with non-blank content before the cut.
    target, kept = None, ""
    for node, start in reversed(index.segments):
        if start >= end:
            continue
        candidate = str(node)[: end - start]
        if candidate.strip():
            target, kept = node, candidate
            break
    if target is None:
        return options.ellipsis

    # Snapshot: the tree is mutated while walking it.
    descendants = list(soup.descendants)
    position = next(i for i, node in enumerate(descendants) if node is target)
    for node in descendants[position + 1:]:
        node.extract()

    target.replace_with(kept.rstrip() + options.ellipsis)
    return soup.decode()
