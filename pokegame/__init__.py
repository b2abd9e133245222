"""Terminal arcade game about capturing pokemon on a board."""

__version__ = "0.1.0"