"""Built-in property data types implementing DataTypeProtocol."""

from boframe.infrastructure.data_types.boolean import Boolean
from boframe.infrastructure.data_types.date_time import DateTime
from boframe.infrastructure.data_types.numeric import Decimal, Integer
from boframe.infrastructure.data_types.text import Email, Text

__all__ = [
    "Boolean",
    "DateTime",
    "Decimal",
    "Email",
    "Integer",
    "Text",
]
