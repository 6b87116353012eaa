"""Web interface for Slop."""
