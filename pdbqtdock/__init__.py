"""Atom typing tables, arrays, quaternions and conformation primitives for molecular docking."""

__version__ = "0.1.0"