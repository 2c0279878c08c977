"""A small 2D entity and state-machine game framework on pygame, with lane-defence and sandbox scenes."""

__version__ = "0.1.0"