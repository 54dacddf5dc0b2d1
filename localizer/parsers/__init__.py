"""Parsers for WXR documents and Polyglot language markup."""
