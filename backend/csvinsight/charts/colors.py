"""Deterministic category colors for chart series."""
from typing import Any

# Hues are interleaved so neighbouring entries never look alike.
PALETTE = [
    "#217346",  # green
    "#4682b4",  # steel blue
    "#e07b39",  # orange
    "#8e44ad",  # purple
    "#c0392b",  # red
    "#20b2aa",  # light sea green
    "#d4a017",  # mustard
    "#6495ed",  # cornflower blue
    "#b5517d",  # raspberry
    "#3cb371",  # medium sea green
    "#7f8c8d",  # slate grey
    "#f39c12",  # amber
    "#2e4a87",  # navy
    "#a0522d",  # sienna
    "#008b8b",  # dark cyan
    "#9b59b6",  # amethyst
    "#e74c3c",  # coral red
    "#5f9ea0",  # cadet blue
]

COLOR_STRIDE = 5


def hash_key(key: str) -> int:
    """Order-sensitive 32-bit string hash (h * 31 + code), non-negative."""
    h = 0
    for char in key:
        h = (h * 31 + ord(char)) & 0xFFFFFFFF
    if h >= 0x80000000:
        h -= 0x100000000
    return abs(h)


def color_for(key: Any, index: int) -> str:
    """
    Color for a category.
    
    Non-empty string keys always map to the same color regardless of index,
    so a label keeps its color across charts and re-renders. Without a key
    the index is strided across the palette.
    """
    if isinstance(key, str) and key:
        return PALETTE[hash_key(key) % len(PALETTE)]
    return PALETTE[(index * COLOR_STRIDE) % len(PALETTE)]
