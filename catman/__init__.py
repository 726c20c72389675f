"""A small package manager for installing and tracking remote packages."""

__version__ = "0.0.1"