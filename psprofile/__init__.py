"""Parse `ps` monitor logs and serve them as a CPU usage chart."""

__version__ = "0.1.0"
