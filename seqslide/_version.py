"""Version information for seqslide."""

__version__ = "0.1.0"
