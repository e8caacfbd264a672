"""Default texts of the built-in rules."""

from __future__ import annotations

from boframe.domain.model.messages import DEFAULT_CATALOG
from boframe.domain.model.property_info import PropertyInfo


def default_message(key: str, prop: object = None, /, **params: object) -> str:
    """Format a built-in message, labelling it with the property's display name."""
    label = prop.display_name if isinstance(prop, PropertyInfo) else ""
    return DEFAULT_CATALOG.format(key, label=label, **params)
