"""A side-scrolling platformer with running, jumping and a grappling hook."""

__version__ = "0.1.0"