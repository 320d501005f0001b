from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional

from werkzeug.wrappers import Response

from chain_request_handler.handler import RequestHandler

__all__ = [
    "NOT_FOUND_STATUS",
    "EMPTY_CHAIN_BODY",
    "EXHAUSTED_CHAIN_BODY",
    "RequestChain",
]

logger = logging.getLogger(__name__)


# ==========================
# Module: chain_request_handler
# Purpose: Try handlers one after another until one of them answers with
#          something other than 404.
# ==========================

NOT_FOUND_STATUS = 404
EMPTY_CHAIN_BODY = "No handlers available"
EXHAUSTED_CHAIN_BODY = "Not Found"


class RequestChain(RequestHandler):
    """
    Ordered fallback dispatcher over a list of request handlers.

    Handlers are tried in the order they were added. The first response whose
    status code is not 404 is returned as is; a 404 means "not mine, try the
    next one". The chain is a handler itself, so chains can be nested.

    Two 404 responses are produced by the chain itself:
      - `EMPTY_CHAIN_BODY` when no handler was ever added;
      - `EXHAUSTED_CHAIN_BODY` when every handler declined.

    :param handlers: Optional initial handlers, kept in iteration order.
    """

    def __init__(self, handlers: Optional[Iterable[RequestHandler]] = None) -> None:
        self._handlers: List[RequestHandler] = []
        for handler in handlers or ():
            self.append(handler)

    def append(self, handler: RequestHandler) -> "RequestChain":
        """
        Adds a handler at the end of the chain.

        :param handler: Any object with a `handle(request)` method.
        :return: The chain itself, allowing fluent `append(...).append(...)` calls.
        """
        self._handlers.append(handler)
        logger.debug("Appended handler %r at position %d", handler, len(self._handlers) - 1)
        return self

    @property
    def handlers(self) -> List[RequestHandler]:
        """
        :return: Copy of the handler list; reordering it does not affect the chain.
        """
        return list(self._handlers)

    def __len__(self) -> int:
        return len(self._handlers)

    def handle(self, request: Any) -> Any:
        """
        Dispatches the request through the chain.

        :param request: Passed untouched to every handler tried.
        :return: The first non-404 response, or a 404 `Response` built by the chain.
        :raises Exception: Whatever a handler raises; the remaining handlers are skipped.
        """
        if not self._handlers:
            logger.warning("Request dispatched to an empty handler chain")
            return self._not_found(EMPTY_CHAIN_BODY)

        for position, handler in enumerate(self._handlers):
            response = handler.handle(request)
            if response.status_code != NOT_FOUND_STATUS:
                logger.debug("Handler %r at position %d answered %d", handler, position, response.status_code)
                return response
            logger.debug("Handler %r at position %d declined", handler, position)

        logger.debug("All %d handlers declined", len(self._handlers))
        return self._not_found(EXHAUSTED_CHAIN_BODY)

    @staticmethod
    def _not_found(body: str) -> Response:
        return Response(body, status=NOT_FOUND_STATUS, mimetype="text/plain")
