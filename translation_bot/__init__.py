"""translation-bot: GitHub webhook receiver for a translation claim workflow."""

__version__ = "0.1.0"
