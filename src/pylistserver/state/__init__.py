"""State/store layer.

This package is the single source of truth for the item collection,
the display order and the selection served by the HTTP API.
"""
