"""Lifecycle state machine of editable model instances.

Transition table (rows = current, columns = requested):

    from \\ to         pristine  created  changed  marked   removed
    None              +         +        o        -        -
    pristine          o         -        +        +        -
    created           +         o        o        removed  +
    changed           +         -        o        +        -
    markedForRemoval  -         -        o        o        +
    removed           -         -        -        -        o

    + legal, o no-op, - ModelTransitionError.
    Requesting removal of a created instance yields removed directly.
    None -> changed is a no-op so that loading data never dirties an instance.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Final

from boframe.domain.exceptions import ModelTransitionError
from boframe.domain.model.enums import ModelState

logger = logging.getLogger(__name__)

_P = ModelState.PRISTINE
_C = ModelState.CREATED
_CH = ModelState.CHANGED
_M = ModelState.MARKED_FOR_REMOVAL
_R = ModelState.REMOVED

# current -> requested -> resulting state; a missing cell is illegal
TRANSITIONS: Final[Mapping[ModelState | None, Mapping[ModelState, ModelState | None]]] = (
    MappingProxyType(
        {
            None: {_P: _P, _C: _C, _CH: None},
            _P: {_P: _P, _CH: _CH, _M: _M},
            _C: {_P: _P, _C: _C, _CH: _C, _M: _R, _R: _R},
            _CH: {_P: _P, _CH: _CH, _M: _M},
            _M: {_CH: _M, _M: _M, _R: _R},
            _R: {_R: _R},
        }
    )
)

_ACCEPTS_CHANGES: Final = frozenset({_P, _C, _CH})


def resolve_transition(
    model_name: str,
    current: ModelState | None,
    requested: ModelState,
) -> ModelState | None:
    """Look up the state resulting from a request.

    Returns:
        Resulting state (equal to current for a no-op).

    Raises:
        ModelTransitionError: Illegal cell of the table.
    """
    row = TRANSITIONS[current]
    if requested not in row:
        raise ModelTransitionError(
            model_name=model_name,
            from_state="NULL" if current is None else current.value,
            to_state=requested.value,
        )
    return row[requested]


class Lifecycle:
    """State and self-dirty flag of one editable instance.

    Each mark_* method returns True when the instance actually moved,
    so the caller knows whether to propagate and invalidate.

    Attributes:
        model_name: Name of the owning model (used in errors and logs).
    """

    __slots__ = ("_is_self_dirty", "_state", "model_name")

    def __init__(self, model_name: str) -> None:
        """Initialize in the pre-initialization None state."""
        self.model_name = model_name
        self._state: ModelState | None = None
        self._is_self_dirty = False

    @property
    def state(self) -> ModelState | None:
        """Get current state. None before the first transition."""
        return self._state

    @property
    def is_self_dirty(self) -> bool:
        """Check if the instance's own data changed (not only a descendant's)."""
        return self._is_self_dirty

    @property
    def is_new(self) -> bool:
        """Check if the instance was never saved."""
        return self._state is _C

    @property
    def is_dirty(self) -> bool:
        """Check if the instance has anything to save."""
        return self._state in (_C, _CH, _M)

    @property
    def is_deleted(self) -> bool:
        """Check if the instance is removed or awaiting removal."""
        return self._state in (_M, _R)

    def mark_as_pristine(self) -> bool:
        """Accept the current data as persisted."""
        return self._move(_P, is_self_dirty=False)

    def mark_as_created(self) -> bool:
        """Mark a new, never saved instance."""
        return self._move(_C, is_self_dirty=True)

    def mark_as_changed(self, *, itself: bool) -> bool:
        """Record a data change of the instance (itself) or of a descendant.

        Returns:
            True if the change was accepted (pristine, created or changed).
        """
        current = self._state
        self.check_change()
        if current not in _ACCEPTS_CHANGES:
            return False
        self._transition(_C if current is _C else _CH, self._is_self_dirty or itself)
        return True

    def check_change(self) -> None:
        """Refuse a data change the current state does not allow.

        Raises:
            ModelTransitionError: Instance is removed.
        """
        resolve_transition(self.model_name, self._state, _CH)

    def mark_for_removal(self) -> bool:
        """Stage the instance for deletion (created instances are removed directly)."""
        target = resolve_transition(self.model_name, self._state, _M)
        return self._move(_M, is_self_dirty=target is _M)

    def mark_as_removed(self) -> bool:
        """Mark the instance as deleted."""
        return self._move(_R, is_self_dirty=False)

    def _move(self, requested: ModelState, *, is_self_dirty: bool) -> bool:
        """Apply a table transition; no-op cells leave the flag untouched."""
        current = self._state
        target = resolve_transition(self.model_name, current, requested)
        if target is current:
            return False
        self._transition(target, is_self_dirty)
        return True

    def _transition(self, target: ModelState | None, is_self_dirty: bool) -> None:
        """Set state and flag."""
        if target is not self._state:
            logger.debug(
                "%s: %s -> %s",
                self.model_name,
                "NULL" if self._state is None else self._state.value,
                "NULL" if target is None else target.value,
            )
        self._state = target
        self._is_self_dirty = is_self_dirty
