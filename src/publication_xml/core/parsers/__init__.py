"""XML readers and writers."""

from .published_item_parser import PublishedItemParser, format_timestamp

__all__ = ["PublishedItemParser", "format_timestamp"]
