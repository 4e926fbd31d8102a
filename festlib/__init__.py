"""Read parts of entries from the FEST drug catalogue XML file."""

__version__ = "0.3.0"