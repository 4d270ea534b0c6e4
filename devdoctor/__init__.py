"""devdoctor: developer machine health checks."""

__version__ = "0.1.0"
