"""Algorithm exercises on linked lists, binary trees, arrays, strings and numbers."""

__version__ = "0.1.0"
__all__ = [
    "arrays",
    "linkedlist",
    "mathutils",
    "searching",
    "strings",
    "structures",
    "tree",
    "treequeries",
]