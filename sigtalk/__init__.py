"""Text messaging between processes over SIGUSR1/SIGUSR2, plus string, buffer and formatting helpers."""

__version__ = "0.1.0"