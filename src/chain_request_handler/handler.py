"""
handler.py — the request handler capability shared by every link of a chain.

A handler accepts a request and produces a response. Handlers are either
subclasses of `RequestHandler` or plain callables wrapped in `FunctionHandler`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable

__all__ = [
    "RequestHandler",
    "FunctionHandler",
]


class RequestHandler(ABC):
    """
    Base interface for anything able to turn a request into a response.

    Responses are expected to expose an integer `status_code`
    (e.g. `werkzeug.wrappers.Response`).
    """

    @abstractmethod
    def handle(self, request: Any) -> Any:
        """
        Produces a response for the request.

        :param request: The incoming request; handlers must not rely on it being mutated by others.
        :return: A response object exposing `status_code`.
        """
        raise NotImplementedError


class FunctionHandler(RequestHandler):
    """
    Adapts a callable `fn(request) -> response` to the handler interface.

    :param func: The callable invoked for every request.
    """

    def __init__(self, func: Callable[[Any], Any]) -> None:
        self._func = func

    @property
    def func(self) -> Callable[[Any], Any]:
        """
        :return: The wrapped callable.
        """
        return self._func

    def handle(self, request: Any) -> Any:
        """Delegates to the wrapped callable; exceptions bubble up unchanged."""
        return self._func(request)

    def __repr__(self) -> str:
        name = getattr(self._func, "__name__", repr(self._func))
        return f"FunctionHandler({name})"
