"""idiomctl — runnable demonstrations of everyday coding idioms."""

__version__ = "0.1.0"
