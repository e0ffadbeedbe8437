"""Evaluator helper modules for the smalljs runtime."""

__all__ = [
    "bind",
    "common",
    "control",
    "fn",
    "objects",
]
