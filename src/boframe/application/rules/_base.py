"""Base class of validation and authorization rules.

Rules are configured in two steps: the constructor names the rule, then
initialize() binds it to its key and message. A rule manager accepts only
initialized rules and never changes them afterwards.
"""

from __future__ import annotations

from abc import ABC

DEFAULT_PRIORITY = 10


class Rule(ABC):
    """Common configuration of every rule.

    Concrete rules must:
    1. Call super().__init__(rule_name)
    2. Call initialize() of their variant (validation or authorization)
    3. Implement execute()

    Attributes:
        rule_name: Name of the rule, unique per rule family.
        message: Failure text. May be empty when a lookup produced nothing.
        priority: Higher runs first.
        stops_processing: A failure halts further rules of the same key.
    """

    def __init__(self, rule_name: str) -> None:
        """Initialize with rule name.

        Raises:
            ValueError: Empty rule name.
        """
        if not isinstance(rule_name, str) or not rule_name:
            raise ValueError("rule_name must not be empty")
        self._rule_name = rule_name
        self._message = ""
        self._priority = DEFAULT_PRIORITY
        self._stops_processing = False
        self._is_initialized = False

    @property
    def rule_name(self) -> str:
        """Get rule name."""
        return self._rule_name

    @property
    def message(self) -> str:
        """Get failure message."""
        return self._message

    @property
    def priority(self) -> int:
        """Get evaluation priority."""
        return self._priority

    @property
    def stops_processing(self) -> bool:
        """Get stop flag."""
        return self._stops_processing

    @property
    def is_initialized(self) -> bool:
        """Check if initialize() completed."""
        return self._is_initialized

    def _initialize_base(
        self,
        message: str,
        priority: int | None,
        stops_processing: bool,
    ) -> None:
        """Set the shared configuration. FAIL-FIRST."""
        if self._is_initialized:
            raise RuntimeError(f"rule '{self._rule_name}' is already initialized")
        if not isinstance(message, str):
            raise TypeError(f"message must be str, got {type(message).__name__}")
        if priority is not None and (isinstance(priority, bool) or not isinstance(priority, int)):
            raise TypeError(f"priority must be int, got {type(priority).__name__}")
        self._message = message
        if priority is not None:
            self._priority = priority
        self._stops_processing = bool(stops_processing)
        self._is_initialized = True

    def __repr__(self) -> str:
        """Show class, name and priority."""
        return f"{type(self).__name__}(rule_name={self._rule_name!r}, priority={self._priority})"
