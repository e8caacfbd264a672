"""Default English message catalog for rule failures."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

DEFAULT_TEMPLATES: Mapping[str, str] = MappingProxyType(
    {
        "required": "{label} is required",
        "minValue": "{label} must be at least {min_value}",
        "maxValue": "{label} must be at most {max_value}",
        "minLength": "{label} must be at least {length} characters long",
        "maxLength": "{label} must be at most {length} characters long",
        "lengthIs": "{label} must be exactly {length} characters long",
        "lengthIs1": "{label} must be exactly 1 character long",
        "expression": "{label} has an invalid format",
        "dependency": "{label} changes dependent values",
        "dataType": "{label} has an invalid value",
        "isInRole": "The user is not a member of the {role} role",
        "isNotInRole": "The user is a member of the {role} role",
        "isInAnyRole": "The user is not a member of any of the {roles} roles",
        "isInAllRoles": "The user is not a member of all of the {roles} roles",
        "isNotInAnyRole": "The user is a member of one of the {roles} roles",
    }
)


@dataclass(frozen=True, slots=True)
class MessageCatalog:
    """Message lookup backed by str.format templates.

    Attributes:
        templates: Message key -> template. Missing keys format to "".
    """

    templates: Mapping[str, str] = field(default_factory=lambda: DEFAULT_TEMPLATES)

    def format(self, key: str, /, **params: object) -> str:
        """Format the template of a key.

        Raises:
            KeyError: Template references a parameter that was not supplied.
        """
        template = self.templates.get(key)
        if template is None:
            return ""
        return template.format_map(params)

    def extend(self, templates: Mapping[str, str]) -> MessageCatalog:
        """Create a catalog with templates added or overridden."""
        return MessageCatalog(templates=MappingProxyType({**self.templates, **templates}))


DEFAULT_CATALOG = MessageCatalog()
