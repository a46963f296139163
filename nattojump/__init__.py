"""A small pygame arcade game of natto stirring, falling, bungee jumping and string swinging."""

__version__ = "0.1.0"