"""Ping web servers over HTTP(S) and gather response statistics."""

__version__ = "0.1.0"