"""Bootstrap launcher for a bundled JRE application."""

__version__ = "0.1.0"
