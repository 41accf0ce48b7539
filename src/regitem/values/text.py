"""
CommonMark text without HTML.

Text is stored as its original markdown source, unrendered. Validation parses
it with markdown-it-py's ``commonmark`` preset and rejects any raw HTML block
or inline HTML; every occurrence is reported, not just the first.

It is recommended to keep to the core set of features (paragraphs, headers,
emphasis, links, and inline code).

Examples:
    >>> from regitem.values.text import Text
    >>> str(Text.parse("foo *bar*"))
    'foo *bar*'
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Final

from markdown_it import MarkdownIt
from markdown_it.token import Token
from pydantic import field_validator

from regitem.core.kind import Kind

from .base import ValueModel, reject_surrogates

__all__ = [
    "HtmlFinding",
    "TextError",
    "Text",
]

_MARKDOWN: Final[MarkdownIt] = MarkdownIt("commonmark")


@dataclass(frozen=True, slots=True)
class HtmlFinding:
    """One HTML occurrence found in markdown source."""

    inline: bool
    value: str

    def __str__(self) -> str:
        if self.inline:
            return f"Inline HTML is not allowed in Text. Found {self.value}"
        return f"HTML is not allowed in Text. Found {self.value}"


class TextError(ValueError):
    """
    Markdown source contains HTML.

    Attributes:
        findings (tuple[HtmlFinding, ...]): Every HTML block and inline tag, in
            document order.
    """

    def __init__(self, findings: tuple[HtmlFinding, ...]) -> None:
        self.findings = findings
        super().__init__("; ".join(str(f) for f in findings))


def _html_tokens(tokens: list[Token]) -> Iterator[HtmlFinding]:
    for token in tokens:
        if token.type == "html_block":
            yield HtmlFinding(inline=False, value=token.content.rstrip("\n"))
        elif token.type == "html_inline":
            yield HtmlFinding(inline=True, value=token.content)
        if token.children:
            yield from _html_tokens(token.children)


class Text(ValueModel):
    """
    Markdown source.

    Attributes:
        source (str): Original markdown, exactly as given.
    """

    kind = Kind.TEXT

    source: str

    @field_validator("source")
    @classmethod
    def _check_source(cls, v: str) -> str:
        return reject_surrogates(v)

    def __str__(self) -> str:
        return self.source

    @classmethod
    def parse(cls, s: str) -> Text:
        """
        Accept markdown that holds no raw or inline HTML.

        Raises:
            TextError: Listing every HTML occurrence.
        """
        findings = tuple(_html_tokens(_MARKDOWN.parse(s)))
        if findings:
            raise TextError(findings)
        return cls(source=s)
