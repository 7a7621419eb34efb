"""OffiSwap: marketplace API for exchanging surplus office items."""

__version__ = "0.1.0"
