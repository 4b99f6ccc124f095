"""A falling-block puzzle game for the terminal, with a high-score table."""

__version__ = "1.0.1"