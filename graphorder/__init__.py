"""Graph vertex reordering: Gorder, RCM, Rabbit Order and graph utilities."""

__version__ = "0.1.0"