"""tierctl — tier-list board for ranking images from the command line."""

__version__ = "0.1.0"
