"""Typed syntax trees, a symbol table, labels, an interpreter and expression code generation."""

__version__ = "0.1.0"