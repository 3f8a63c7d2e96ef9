"""
Game domain models and provider protocols (engine-agnostic).

Modules in this package should not import any rendering / IO systems and
remain fully testable with unit tests.
"""

__all__ = [
    "interfaces",
    "kinds",
    "models",
    "world",
]
