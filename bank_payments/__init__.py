"""Scheme-aware payment validation against account data stores."""

__version__ = "0.1.0"
