"""Grenade lineup converter: gs lineups to mono, primordial and kidua schemas."""

__version__ = "0.1.0"
