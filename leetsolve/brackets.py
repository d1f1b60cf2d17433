"""Stack-based string problems: brackets, backspaces and adjacent duplicates."""

from __future__ import annotations

_PAIRS = {")": "(", "]": "[", "}": "{"}


def is_valid(s: str) -> bool:
    """Tell whether every bracket in s is closed in the right order."""
    stack: list[str] = []
    for char in s:
        if stack and stack[-1] == _PAIRS.get(char):
            stack.pop()
        else:
            stack.append(char)
    return not stack


def backspace_string(s: str) -> str:
    """Apply every '#' in s as a backspace and return what is left."""
    stack: list[str] = []
    for char in s:
        if char == "#":
            if stack:
                stack.pop()
        else:
            stack.append(char)
    return "".join(stack)


def backspace_compare(s: str, t: str) -> bool:
    """Tell whether s and t are equal once backspaces are applied."""
    return backspace_string(s) == backspace_string(t)


def remove_duplicates(s: str) -> str:
    """Repeatedly remove pairs of equal adjacent characters."""
    stack: list[str] = []
    for char in s:
        if stack and stack[-1] == char:
            stack.pop()
        else:
            stack.append(char)
    return "".join(stack)


def max_depth(s: str) -> int:
    """Return the deepest parenthesis nesting, measured at each closing bracket."""
    depth = 0
    deepest = 0
    for char in s:
        if char == "(":
            depth += 1
        elif char == ")":
            deepest = max(deepest, depth)
            depth -= 1
    return deepest