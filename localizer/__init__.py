"""Polyglot to Polylang migration of WordPress WXR exports."""

__version__ = "0.1.0"
