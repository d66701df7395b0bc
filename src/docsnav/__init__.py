"""Generate docs.json navigation from a documentation content tree."""

__version__ = "0.1.0"
