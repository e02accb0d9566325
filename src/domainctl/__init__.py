"""domainctl — search a disposable mail domain catalog and copy entries."""

__version__ = "0.1.0"
