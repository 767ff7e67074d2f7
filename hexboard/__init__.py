"""Read Hex board positions drawn as text and answer questions about them."""

__version__ = "0.1.0"
__all__ = ["__version__"]