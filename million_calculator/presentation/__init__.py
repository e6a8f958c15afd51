"""Formatting and narrative for the result screen."""
