"""Formatter contract, dispatcher and shared rendering helpers."""
