"""
OpenAI Provider
"""

from .dalle import DALLEProvider

__all__ = [
    "DALLEProvider",
]
