"""A top-down driving game where the player dodges falling trash bags."""

__version__ = "0.1.0"
__all__ = ["__version__"]