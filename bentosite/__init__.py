"""Static site builder, preview server and git publisher for a personal bento-style website."""

__version__ = "0.1.0"