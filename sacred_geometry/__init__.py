"""
Sacred Geometry spell preparation helper.

Checks whether a roll of d6s can produce every prime constant of a spell
level using +, -, * and / evaluated left to right.
"""

__version__ = "0.1.0"
