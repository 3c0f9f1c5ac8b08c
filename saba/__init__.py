"""Core of a small browser engine: URLs, HTTP, a DOM tree, styles and a tiny JavaScript interpreter."""

__version__ = "0.1.0"