"""
Euler module.

Provides Euler path and circuit extraction with up-front checks of
connectivity and degree balance.
"""

from graphkit.euler.extractor import find_euler_circuit, find_euler_path, has_euler_path

__all__ = ["find_euler_circuit", "find_euler_path", "has_euler_path"]
