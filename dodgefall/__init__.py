"""Dodge the falling platforms: a small arcade game with a pygame window."""

__version__ = "0.1.0"
__all__ = ["__version__"]