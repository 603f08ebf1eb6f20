"""Design-token theme engine: colour palettes, size scales, token expressions and component themes."""

__version__ = "0.4.0"