"""A small printf with c, s, p, d, i, u, x, X and % conversions, plus character, string and linked-list helpers."""

__version__ = "0.1.0"
__all__ = ["chars", "conversions", "printf", "demo", "lists", "strings"]