"""Locale resolution and translation of textual calendar components."""
