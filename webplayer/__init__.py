"""WebPlayer: personal playlist and play-history manager served over HTTP."""

__version__ = "0.1.0"
