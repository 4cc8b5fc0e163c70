"""Lexer, parser and diagnostics for a small dependently typed language, and a framebuffer text console model."""

__version__ = "0.1.0"