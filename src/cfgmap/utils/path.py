"""Slash-delimited path helpers."""

from __future__ import annotations

__all__ = ["SEPARATOR", "split_first", "split_last", "join_path"]

SEPARATOR = "/"


def split_first(path: str) -> tuple[str, str | None]:
    """Split a path at its first separator.

    Args:
        path: A plain key or a ``/``-delimited path.

    Returns:
        ``(head, rest)``. ``rest`` is None when the path has no separator.
        Empty segments are kept, so ``"/a"`` gives ``("", "a")``.
    """
    head, sep, rest = path.partition(SEPARATOR)
    if not sep:
        return path, None
    return head, rest


def split_last(path: str) -> tuple[str | None, str]:
    """Split a path at its last separator.

    Returns:
        ``(parent, key)``. ``parent`` is None when the path has no separator.
    """
    parent, sep, key = path.rpartition(SEPARATOR)
    if not sep:
        return None, path
    return parent, key


def join_path(*segments: str) -> str:
    return SEPARATOR.join(segments)
