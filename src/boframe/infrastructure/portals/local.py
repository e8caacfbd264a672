"""Local portal adapter.

Serves remote requests from in-process repository objects, one per model uri.
Useful in tests and in applications that keep models and data in one process.
"""

from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass, field
from typing import Any

from boframe.domain.model.remote_request import RemoteRequest

logger = logging.getLogger(__name__)


@dataclass
class LocalPortal:
    """RemotePort dispatching to repository objects by model uri.

    A request calls the repository attribute named after its method, or after
    its action when no method is given, with the request payload. Handlers
    may be plain functions or coroutines.

    Example:
        class BookRepository:
            async def fetch(self, criteria):
                return {"title": "Dune"}

        portal = LocalPortal()
        portal.register("library/books", BookRepository())

    Attributes:
        repositories: Model uri -> repository object.
        requests: Every request received, in order.
    """

    repositories: dict[str, Any] = field(default_factory=dict)
    requests: list[RemoteRequest] = field(default_factory=list)

    def register(self, uri: str, repository: Any) -> None:
        """Serve a model uri from a repository object.

        Raises:
            ValueError: Empty uri or uri already registered.
        """
        if not uri:
            raise ValueError("uri must not be empty")
        if uri in self.repositories:
            raise ValueError(f"uri '{uri}' already registered")
        self.repositories[uri] = repository

    async def invoke(self, request: RemoteRequest) -> Any:
        """Run the handler of a request.

        Raises:
            LookupError: No repository for the model uri.
            AttributeError: Repository has no handler for the request.
        """
        self.requests.append(request)
        repository = self.repositories.get(request.model_uri)
        if repository is None:
            raise LookupError(f"no repository for '{request.model_uri}'")
        name = request.method or request.action.value
        handler = getattr(repository, name, None)
        if not callable(handler):
            raise AttributeError(f"repository of '{request.model_uri}' has no handler '{name}'")

        logger.debug("%s.%s", request.model_uri, name)
        result = handler(request.payload)
        if inspect.isawaitable(result):
            result = await result
        return result
