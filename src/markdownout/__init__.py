"""markdownout - write well-formed Markdown without hand-managing its whitespace rules."""

from markdownout.errors import InvalidOptionError, MarkdownOutError, ResourceReleasedError
from markdownout.formats import MdFormat, MdStyle, heading_format
from markdownout.text import (
    cleanse,
    format_text,
    indent,
    number_list_item,
    ordered_list_prefix,
    style,
    style_and_format,
)
from markdownout.writer import MarkdownWriter, TextSink

__version__ = "0.1.0"

__all__ = [
    "InvalidOptionError",
    "MarkdownOutError",
    "MarkdownWriter",
    "MdFormat",
    "MdStyle",
    "ResourceReleasedError",
    "TextSink",
    "cleanse",
    "format_text",
    "heading_format",
    "indent",
    "number_list_item",
    "ordered_list_prefix",
    "style",
    "style_and_format",
]
