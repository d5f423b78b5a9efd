"""Command-line and text rendering surfaces."""
