from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Iterator

_END = object()


@dataclass(slots=True)
class _Frame:
    items: Iterator[Any]
    closer: str
    is_mapping: bool
    count: int = 0


def _open(value: Any) -> tuple[str, _Frame] | None:
    if isinstance(value, dict):
        return "{", _Frame(iter(value.items()), "}", True)
    if isinstance(value, (list, tuple)):
        return "[", _Frame(iter(value), "]", False)
    return None


def iter_json(value: Any, indent: int | None = None, ensure_ascii: bool = True) -> Iterator[str]:
    """Encode ``value`` as JSON text chunks using an explicit stack.

    Nesting depth is not limited by the interpreter recursion limit. Scalars
    are encoded with ``json.dumps``. Without ``indent`` the output is compact.
    """

    key_separator = ": " if indent is not None else ":"

    def newline(depth: int) -> str:
        return "\n" + " " * (indent * depth) if indent is not None else ""

    def scalar(item: Any) -> str:
        return json.dumps(item, ensure_ascii=ensure_ascii)

    opened = _open(value)
    if opened is None:
        yield scalar(value)
        return
    token, frame = opened
    yield token
    stack = [frame]

    while stack:
        frame = stack[-1]
        entry = next(frame.items, _END)
        if entry is _END:
            stack.pop()
            yield (newline(len(stack)) if frame.count else "") + frame.closer
            continue

        prefix = "," if frame.count else ""
        frame.count += 1
        prefix += newline(len(stack))
        if frame.is_mapping:
            key, child = entry
            prefix += scalar(str(key)) + key_separator
        else:
            child = entry

        opened = _open(child)
        if opened is None:
            yield prefix + scalar(child)
        else:
            token, child_frame = opened
            yield prefix + token
            stack.append(child_frame)


def dumps(value: Any, indent: int | None = None, ensure_ascii: bool = True) -> str:
    return "".join(iter_json(value, indent=indent, ensure_ascii=ensure_ascii))


__all__ = ["dumps", "iter_json"]
