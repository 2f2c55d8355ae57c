"""Text formatting helpers, bit flags, a block memory pool, bounded containers, HTTP request head parsing and a JSON scanner with a node tree."""

__version__ = "0.4.3"