"""A tile-based roguelike played with pygame, built on a small entity-component-system core."""

__version__ = "0.1.0"