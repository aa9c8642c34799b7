"""Utility functions for seqslide."""
