"""Markdown document writer.

:class:`MarkdownWriter` owns a single text sink (normally a file opened for
writing or appending) and emits styled, formatted and cleansed Markdown to
it one call at a time.

Usage::

    with MarkdownWriter("notes.md") as md:
        md.write_line("Notes", md_format=MdFormat.HEADING_1)
        md.write_unordered_list_item("first")
        md.write_unordered_list_item("nested", indent_level=1)
"""

from __future__ import annotations

import logging
from pathlib import Path
from types import TracebackType
from typing import Any, Protocol

from markdownout.errors import ResourceReleasedError
from markdownout.formats import (
    DEFAULT_LIST_ITEM_NUMBER,
    LINE_BREAK,
    PARAGRAPH_BREAK,
    MdFormat,
    MdStyle,
)
from markdownout.text import cleanse, indent, number_list_item, style_and_format

logger = logging.getLogger(__name__)


class TextSink(Protocol):
    """Anything a :class:`MarkdownWriter` can append text to."""

    def write(self, text: str) -> Any: ...

    def close(self) -> None: ...


class MarkdownWriter:
    """Write Markdown text to a file or other text sink.

    Args:
        path: Output file path, including extension.
        append: Append to the file's existing contents instead of
            truncating it.
        encoding: Text encoding of the output file.
        make_dirs: Create missing parent directories before opening.
    """

    def __init__(
        self,
        path: str | Path,
        append: bool = False,
        *,
        encoding: str = "utf-8",
        make_dirs: bool = False,
    ) -> None:
        path = Path(path)
        if make_dirs:
            path.parent.mkdir(parents=True, exist_ok=True)
        # newline="" keeps the CRLF sequences from cleanse() byte-for-byte
        self._sink: TextSink | None = open(
            path, "a" if append else "w", encoding=encoding, newline=""
        )
        self.path: Path | None = path
        logger.debug("Opened %s (%s)", path, "append" if append else "truncate")

    @classmethod
    def from_sink(cls, sink: TextSink) -> MarkdownWriter:
        """Bind a writer to an already open *sink*.

        The writer takes ownership: closing the writer closes the sink.
        """
        writer = cls.__new__(cls)
        writer._sink = sink
        writer.path = None
        logger.debug("Bound writer to %s", type(sink).__name__)
        return writer

    # -- lifecycle ----------------------------------------------------------

    @property
    def closed(self) -> bool:
        return self._sink is None

    def close(self) -> None:
        """Close the sink.  Calling this more than once is harmless."""
        if self._sink is None:
            logger.debug("Writer already closed")
            return
        sink, self._sink = self._sink, None
        sink.close()
        logger.debug("Closed %s", self.path or type(sink).__name__)

    release = close

    def __enter__(self) -> MarkdownWriter:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    # -- emitting -----------------------------------------------------------

    def _emit(self, text: str, separator: str = "") -> None:
        # one write per call so a failing sink never leaves half an item
        self._sink.write(cleanse(text) + separator)

    def write(
        self,
        output: Any,
        md_style: MdStyle | str | None = MdStyle.NONE,
        md_format: MdFormat | str | None = MdFormat.NONE,
    ) -> None:
        """Write *output* with no trailing line ending."""
        self._check_open()
        self._emit(style_and_format(output, md_style, md_format))

    def write_line(
        self,
        output: Any,
        md_style: MdStyle | str | None = MdStyle.NONE,
        md_format: MdFormat | str | None = MdFormat.NONE,
    ) -> None:
        """Write *output* followed by a paragraph break."""
        self._check_open()
        self._emit(style_and_format(output, md_style, md_format), PARAGRAPH_BREAK)

    def write_line_single(
        self,
        output: Any,
        md_style: MdStyle | str | None = MdStyle.NONE,
        md_format: MdFormat | str | None = MdFormat.NONE,
    ) -> None:
        """Write *output* followed by a hard line break (same paragraph)."""
        self._check_open()
        self._emit(style_and_format(output, md_style, md_format), LINE_BREAK)

    def write_unordered_list_item(
        self,
        output: Any,
        indent_level: int = 0,
        md_style: MdStyle | str | None = MdStyle.NONE,
    ) -> None:
        """Write *output* as a ``- `` list item, indented *indent_level* times.

        Negative indent levels are treated as zero.
        """
        self._check_open()
        text = style_and_format(output, md_style, MdFormat.UNORDERED_LIST_ITEM)
        self._emit(indent(text, indent_level), PARAGRAPH_BREAK)

    def write_ordered_list_item(
        self,
        output: Any,
        item_number: int = DEFAULT_LIST_ITEM_NUMBER,
        indent_level: int = 0,
        md_style: MdStyle | str | None = MdStyle.NONE,
    ) -> None:
        """Write *output* as an ordered list item.

        *item_number* only changes the digits in the raw text; renderers
        number ordered lists themselves.
        """
        self._check_open()
        text = style_and_format(output, md_style, MdFormat.ORDERED_LIST_ITEM)
        if item_number != DEFAULT_LIST_ITEM_NUMBER:
            text = number_list_item(text, item_number)
        self._emit(indent(text, indent_level), PARAGRAPH_BREAK)

    def _check_open(self) -> None:
        if self._sink is None:
            raise ResourceReleasedError("cannot write to a closed MarkdownWriter")
