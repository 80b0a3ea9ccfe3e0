"""
Root-finding backends.
"""

from pynumerics.rootfind.backends.cpu import CPUNewtonBackend

__all__ = ["CPUNewtonBackend"]
