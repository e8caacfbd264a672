"""Request handed to the remote port."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from boframe.domain.model.enums import RemoteAction


@dataclass(frozen=True, slots=True)
class RemoteRequest:
    """One remote action of a root model.

    Attributes:
        action: create/fetch/insert/update/remove/execute.
        model_name: Name of the model.
        model_uri: Address of the model in the repository.
        method: Alternative repository method. None = the default one.
        payload: Filter or DTO sent along.
    """

    action: RemoteAction
    model_name: str
    model_uri: str
    method: str | None = None
    payload: Any = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.action, RemoteAction):
            raise TypeError(f"action must be RemoteAction, got {type(self.action).__name__}")
        if not self.model_name:
            raise ValueError("model_name must not be empty")
        if not self.model_uri:
            raise ValueError("model_uri must not be empty")
        if self.method is not None and not self.method:
            raise ValueError("method must not be empty")
