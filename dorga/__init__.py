"""A one-button arcade game of a spinning rocket in an endless star field."""

__version__ = "0.1.0"