"""Pure text transformations used to build Markdown output.

Text is styled before it is formatted: wrapping an already prefixed line in
a style marker would put the marker around the block prefix as well and the
line would no longer parse as a heading, quote or list item.  Callers that
need both should use :func:`style_and_format`.
"""

from __future__ import annotations

from typing import Any

from markdownout.formats import (
    DEFAULT_LIST_ITEM_NUMBER,
    FORMAT_PREFIXES,
    LIST_ITEM_INDENT,
    NEWLINE,
    ORDERED_LIST_ITEM_PREFIX,
    STYLE_WRAPS,
    TAB,
    MdFormat,
    MdStyle,
)


def style(text: Any, md_style: MdStyle | str | None = MdStyle.NONE) -> str:
    """Wrap *text* on both sides with the marker for *md_style*."""
    wrap = STYLE_WRAPS[MdStyle.coerce(md_style)]
    return f"{wrap}{text}{wrap}"


def format_text(text: Any, md_format: MdFormat | str | None = MdFormat.NONE) -> str:
    """Prepend the block prefix for *md_format* to *text*."""
    return FORMAT_PREFIXES[MdFormat.coerce(md_format)] + str(text)


def style_and_format(
    text: Any,
    md_style: MdStyle | str | None = MdStyle.NONE,
    md_format: MdFormat | str | None = MdFormat.NONE,
) -> str:
    """Style *text* and then format the result."""
    return format_text(style(text, md_style), md_format)


def indent(text: Any, level: int) -> str:
    """Prefix *text* with *level* list indents.

    Levels of zero or below leave the text untouched.
    """
    text = str(text)
    if level > 0:
        return LIST_ITEM_INDENT * level + text
    return text


def ordered_list_prefix(number: int = DEFAULT_LIST_ITEM_NUMBER) -> str:
    """Return the ordered list marker carrying *number* as its ordinal."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"list item number must be an int, not {type(number).__name__}")
    if number == DEFAULT_LIST_ITEM_NUMBER:
        return ORDERED_LIST_ITEM_PREFIX
    return str(number) + ORDERED_LIST_ITEM_PREFIX[len(str(DEFAULT_LIST_ITEM_NUMBER)):]


def number_list_item(text: str, number: int) -> str:
    """Swap the default ordinal of a formatted ordered list item for *number*.

    Only the raw text changes; Markdown renderers number list items on their
    own regardless of the digits in the source.
    """
    prefix = ordered_list_prefix(number)
    if not text.startswith(ORDERED_LIST_ITEM_PREFIX):
        raise ValueError(f"not an ordered list item: {text!r}")
    return prefix + text[len(ORDERED_LIST_ITEM_PREFIX):]


def cleanse(text: str) -> str:
    """Expand tabs and make every line ending ``\\r\\n``.

    Existing ``\\r\\n`` pairs are first collapsed to ``\\n`` so the final
    expansion does not double them; applying this twice gives the same
    result as applying it once.
    """
    text = text.replace("\t", TAB)
    text = text.replace("\r\n", "\n")
    return text.replace("\n", NEWLINE)
