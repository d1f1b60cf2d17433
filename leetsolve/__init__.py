"""Solutions to classic algorithm exercises over lists, strings, linked lists and grids."""

__version__ = "0.1.0"
__all__ = [
    "brackets",
    "counting",
    "grids",
    "linked_list",
    "searching",
    "sequences",
    "text",
]