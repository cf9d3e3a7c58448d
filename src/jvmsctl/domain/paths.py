"""Lexical path normalization.

Nothing here touches the filesystem: symlinks are never resolved and
nonexistent paths normalize like any other. Every path stored in the
configuration model passes through :func:`absolutize` when it is added, so
later comparisons are between already-normalized absolute paths.
"""

from __future__ import annotations

import os
from pathlib import Path, PurePath

_PARENT = ".."


def normalize(path: str | os.PathLike[str]) -> Path:
    """Collapse ``.`` and ``..`` components without consulting the disk.

    ``..`` cancels the preceding normal segment. Directly under a root it is
    dropped (the root is its own parent). With nothing to cancel (empty
    stack, leading ``..`` run, or a drive-only anchor such as ``C:``) it is
    kept as an unresolved ascent.

    Examples:
        >>> normalize("a/./b/../c").as_posix()
        'a/c'
        >>> normalize("/../x").as_posix()
        '/x'
        >>> normalize("../../a").as_posix()
        '../../a'
        >>> normalize("a/..").as_posix()
        '.'
    """
    pure = PurePath(path)
    anchor = pure.anchor
    parts = pure.parts[1:] if anchor else pure.parts

    stack: list[str] = [anchor] if anchor else []
    for part in parts:
        if part == ".":
            continue
        if part != _PARENT:
            stack.append(part)
            continue

        if not stack or stack[-1] == _PARENT:
            stack.append(part)
        elif anchor and len(stack) == 1:
            # Drive-relative anchors ("C:") have no root to stop at.
            if not pure.root:
                stack.append(part)
        else:
            stack.pop()

    if not stack:
        return Path(".")
    return Path(*stack)


def absolutize(path: str | os.PathLike[str]) -> Path:
    """Return *path* as a normalized absolute path.

    Relative paths are joined onto the current working directory at call
    time before normalizing.
    """
    candidate = PurePath(path)
    if not candidate.is_absolute():
        candidate = Path.cwd() / candidate
    return normalize(candidate)


def is_within(path: PurePath, ancestor: PurePath) -> bool:
    """Whether *path* equals *ancestor* or lies beneath it, component-wise.

    ``/foo`` is not within ``/foobar`` and vice versa.
    """
    return path == ancestor or ancestor in path.parents
