"""General purpose helpers: bit shifts, edit distance, versions and ANSI escape sequences."""

__version__ = "0.3.1a0"

__all__ = ["algorithm", "ansiesc", "info", "manip", "utility", "version"]