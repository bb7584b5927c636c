"""A list of callables invoked together."""

from __future__ import annotations

from typing import Any, Callable, List


class Callback:
    """Holds registered functions and calls them in registration order."""

    def __init__(self) -> None:
        self._funcs: List[Callable[..., Any]] = []

    def register(self, func: Callable[..., Any]) -> None:
        if not callable(func):
            raise TypeError("callback must be callable")
        self._funcs.append(func)

    def invoke(self, *args: Any, **kwargs: Any) -> None:
        for func in list(self._funcs):
            func(*args, **kwargs)

    def clear(self) -> None:
        self._funcs.clear()

    def empty(self) -> bool:
        return not self._funcs

    def __len__(self) -> int:
        return len(self._funcs)