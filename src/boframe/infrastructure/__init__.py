"""Infrastructure layer: data types and portal adapters."""

from boframe.infrastructure.data_types import Boolean, DateTime, Decimal, Email, Integer, Text
from boframe.infrastructure.portals import LocalPortal

__all__ = [
    "Boolean",
    "DateTime",
    "Decimal",
    "Email",
    "Integer",
    "LocalPortal",
    "Text",
]
