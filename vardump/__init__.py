"""Width-aware, optionally colourised formatters that turn values into text for debug output."""

__version__ = "0.1.0"