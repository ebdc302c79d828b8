"""Keep a list of events, see what is coming up, and save it to plain-text files."""

__version__ = "0.1.0"