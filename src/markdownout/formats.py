"""Markdown style and format catalogue.

Defines the closed sets of inline styles (:class:`MdStyle`) and block
formats (:class:`MdFormat`) together with the literal marker strings the
composer wraps around or prepends to text.  Everything here is constant.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from markdownout.errors import InvalidOptionError

# ---------------------------------------------------------------------------
# Whitespace constants
# ---------------------------------------------------------------------------

NEWLINE = "\r\n"
TAB = " " * 4
LINE_BREAK = NEWLINE + " " * 2   # hard break inside a paragraph
PARAGRAPH_BREAK = NEWLINE * 2
LIST_ITEM_INDENT = " " * 5       # lines sublist text up under "1. " / "- "

# ---------------------------------------------------------------------------
# Inline wraps
# ---------------------------------------------------------------------------

ITALIC_WRAP = "*"
BOLD_WRAP = "**"
BOLD_ITALIC_WRAP = ITALIC_WRAP + BOLD_WRAP
CODE_WRAP = "`"
STRIKE_THROUGH_WRAP = "~~"

# ---------------------------------------------------------------------------
# Block prefixes
# ---------------------------------------------------------------------------

HEADING_1_PREFIX = "# "
HEADING_2_PREFIX = "## "
HEADING_3_PREFIX = "### "
HEADING_4_PREFIX = "#### "
HEADING_5_PREFIX = "##### "
HEADING_6_PREFIX = "###### "
QUOTE_PREFIX = "> "
UNORDERED_LIST_ITEM_PREFIX = "- "
DEFAULT_LIST_ITEM_NUMBER = 1
ORDERED_LIST_ITEM_PREFIX = f"{DEFAULT_LIST_ITEM_NUMBER}. "


class _Option(Enum):
    """Shared lookup behaviour for the option enums."""

    @classmethod
    def coerce(cls, value: Any) -> Any:
        """Return the member matching *value*.

        Accepts a member, its value (``"bold_italic"``), its name in any case
        with or without underscores (``"BOLD_ITALIC"``, ``"BoldItalic"``) or
        ``None`` for the ``NONE`` member.  Raises
        :class:`InvalidOptionError` for anything else.
        """
        if value is None:
            return cls["NONE"]
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip()
            folded = key.upper().replace("_", "")
            for member in cls:
                if key == member.value or folded == member.name.replace("_", ""):
                    return member
        raise InvalidOptionError(cls._kind(), value, [m.value for m in cls])

    @classmethod
    def _kind(cls) -> str:
        return cls.__name__[2:].lower()


class MdStyle(_Option):
    """Inline Markdown style wrapped around a span of text."""

    NONE = "none"
    ITALIC = "italic"
    BOLD = "bold"
    BOLD_ITALIC = "bold_italic"
    CODE = "code"
    STRIKE_THROUGH = "strike_through"


class MdFormat(_Option):
    """Block-level Markdown format prepended to a line of text."""

    NONE = "none"
    HEADING_1 = "heading_1"
    HEADING_2 = "heading_2"
    HEADING_3 = "heading_3"
    HEADING_4 = "heading_4"
    HEADING_5 = "heading_5"
    HEADING_6 = "heading_6"
    QUOTE = "quote"
    UNORDERED_LIST_ITEM = "unordered_list_item"
    ORDERED_LIST_ITEM = "ordered_list_item"


STYLE_WRAPS: dict[MdStyle, str] = {
    MdStyle.NONE: "",
    MdStyle.ITALIC: ITALIC_WRAP,
    MdStyle.BOLD: BOLD_WRAP,
    MdStyle.BOLD_ITALIC: BOLD_ITALIC_WRAP,
    MdStyle.CODE: CODE_WRAP,
    MdStyle.STRIKE_THROUGH: STRIKE_THROUGH_WRAP,
}

FORMAT_PREFIXES: dict[MdFormat, str] = {
    MdFormat.NONE: "",
    MdFormat.HEADING_1: HEADING_1_PREFIX,
    MdFormat.HEADING_2: HEADING_2_PREFIX,
    MdFormat.HEADING_3: HEADING_3_PREFIX,
    MdFormat.HEADING_4: HEADING_4_PREFIX,
    MdFormat.HEADING_5: HEADING_5_PREFIX,
    MdFormat.HEADING_6: HEADING_6_PREFIX,
    MdFormat.QUOTE: QUOTE_PREFIX,
    MdFormat.UNORDERED_LIST_ITEM: UNORDERED_LIST_ITEM_PREFIX,
    MdFormat.ORDERED_LIST_ITEM: ORDERED_LIST_ITEM_PREFIX,
}


def heading_format(level: int) -> MdFormat:
    """Return the heading format for *level* ``1``--``6``."""
    if isinstance(level, bool) or not isinstance(level, int) or not 1 <= level <= 6:
        raise InvalidOptionError(
            "heading level", level, [str(i) for i in range(1, 7)]
        )
    return MdFormat[f"HEADING_{level}"]
