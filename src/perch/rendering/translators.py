"""Translator adapters for plain functions.

Lets application code write a translator as an ordinary function whose
keyword parameters are the route's capture names::

    @app.json("api/books/:isbn")
    def book(isbn: str) -> Book:
        ...
"""

import inspect
from collections.abc import Callable, Mapping
from typing import Any

from perch.errors import ParameterError


class FunctionTranslator[T]:
    """Call *func* with the captures it asks for as keyword arguments.

    A required parameter with no matching capture is a ``ParameterError``.
    Functions taking ``**kwargs`` receive every capture.
    """

    __slots__ = ("_accepts_all", "_func", "_params")

    def __init__(self, func: Callable[..., T]) -> None:
        self._func = func
        sig = inspect.signature(func)
        self._params = tuple(
            p
            for p in sig.parameters.values()
            if p.kind in (inspect.Parameter.POSITIONAL_OR_KEYWORD, inspect.Parameter.KEYWORD_ONLY)
        )
        self._accepts_all = any(
            p.kind is inspect.Parameter.VAR_KEYWORD for p in sig.parameters.values()
        )

    @property
    def __name__(self) -> str:
        return getattr(self._func, "__name__", type(self._func).__name__)

    def convert(self, captures: Mapping[str, str]) -> T:
        if self._accepts_all:
            return self._func(**captures)

        kwargs: dict[str, Any] = {}
        for param in self._params:
            if param.name in captures:
                kwargs[param.name] = captures[param.name]
            elif param.default is inspect.Parameter.empty:
                raise ParameterError(f"missing {param.name}")
        return self._func(**kwargs)

    def __repr__(self) -> str:
        return f"FunctionTranslator({self.__name__})"
