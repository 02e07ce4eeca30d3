"""Glossary-protected medical translation service."""

__version__ = "0.1.0"
