"""Textual widgets that place rendered charts on screen."""
