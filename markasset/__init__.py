"""markasset - content-addressed image references for markdown document trees."""

__version__ = "0.1.0"
