"""Text messages between processes sent one bit per signal, with small string, number and printf helpers."""

__version__ = "0.1.0"