"""Conversion between Money and locale-specific display strings."""
