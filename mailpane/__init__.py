"""mailpane - a small terminal email client."""

__version__ = "0.1.0"
