"""Remote port: the abstract repository behind root models.

The core only needs "send this DTO, get that DTO back, or get an error".
Transport and persistence are the implementation's business.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from boframe.domain.model.remote_request import RemoteRequest


class RemotePort(Protocol):
    """Contract for remote action execution.

    Any exception raised by invoke() is caught at the action boundary and
    re-raised as RemoteActionError. Implementations never retry for the core.

    Example:
        class HttpPortal:
            async def invoke(self, request: RemoteRequest) -> Any:
                url = f"{self._base}/{request.model_uri}/{request.action.value}"
                async with self._session.post(url, json=request.payload) as response:
                    response.raise_for_status()
                    return await response.json()
    """

    async def invoke(self, request: RemoteRequest) -> Any:
        """Execute one remote action.

        Args:
            request: Action, model identity, optional method and payload.

        Returns:
            Response payload (a DTO mapping, a list of DTOs, or None).
        """
        ...
