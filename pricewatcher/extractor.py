"""Extracting the price from a bank page."""

from __future__ import annotations

import math
import re
import struct
from html.parser import HTMLParser
from typing import Optional, TextIO, Union

_VOID_ELEMENTS = frozenset(
    {
        "area", "base", "br", "col", "embed", "hr", "img", "input",
        "keygen", "link", "meta", "param", "source", "track", "wbr",
    }
)

_FLOAT = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


class ExtractionError(Exception):
    """The page holds no price."""


class _TextCollector(HTMLParser):
    """Collects text nodes in document order together with their parent tag."""

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self._stack: list[str] = []
        self.texts: list[tuple[Optional[str], str]] = []

    def handle_starttag(self, tag, attrs):
        if tag not in _VOID_ELEMENTS:
            self._stack.append(tag)

    def handle_startendtag(self, tag, attrs):
        self.handle_starttag(tag, attrs)

    def handle_endtag(self, tag):
        if tag not in self._stack:
            return
        while self._stack.pop() != tag:
            pass

    def handle_data(self, data):
        parent = self._stack[-1] if self._stack else None
        self.texts.append((parent, data))


def _to_float32(value: float) -> float:
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def parse_price(data: str) -> float:
    """Turn a text like ``"5 123,45"`` into a number; unparsable text gives 0."""
    cleaned = data.replace("\u00a0", "").replace(",", ".")
    if not _FLOAT.fullmatch(cleaned):
        return 0.0
    return _to_float32(float(cleaned))


class PriceExtractor:
    """Finds the first text inside ``tag`` that matches ``page_reg``."""

    def __init__(self, page_reg: str = r"([0-9]).*([0-9])*,([0-9])*", tag: str = "div") -> None:
        self.tag = tag
        self._pattern = re.compile(page_reg)

    def extract_price(self, body: Union[str, TextIO]) -> float:
        """Return the price found in an HTML document."""
        text = body if isinstance(body, str) else body.read()
        collector = _TextCollector()
        collector.feed(text)
        collector.close()

        for parent, data in collector.texts:
            if parent == self.tag and self._pattern.search(data):
                return parse_price(data)

        raise ExtractionError(
            f"the document does not have a price value with the tag: {self.tag}"
        )