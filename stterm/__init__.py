"""Building blocks for a simple X terminal emulator: screen grid, box drawing, selection, URLs, resources and key tables."""

__version__ = "0.8.4"