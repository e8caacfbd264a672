"""Default user value object."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class UserInfo:
    """Immutable acting user.

    Attributes:
        user_code: Identifier of the user.
        user_name: Display name.
        roles: Roles the user belongs to.
    """

    user_code: str
    user_name: str = ""
    roles: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.user_code:
            raise ValueError("user_code must not be empty")
        if not isinstance(self.roles, frozenset):
            raise TypeError(f"roles must be frozenset, got {type(self.roles).__name__}")

    def is_in_role(self, role: str) -> bool:
        """Check if the user belongs to the role."""
        return role in self.roles
