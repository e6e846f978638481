"""Image viewer core: zoom and scroll state, Mica theme, NTP clock, command-line parsing and reporting."""

__version__ = "0.1.0"

__all__ = ["clock", "cmdline", "reporting", "result", "theme", "viewer", "zoom"]