"""Textual front end for the chart renderers."""
