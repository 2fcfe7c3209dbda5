"""metro-signs: Generate tile-based station signs for transit lines."""

__version__ = "0.1.0"
