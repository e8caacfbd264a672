"""Domain ports (interfaces/protocols)."""

from boframe.domain.ports.data_type import DataTypeProtocol
from boframe.domain.ports.messages import MessageLookupProtocol
from boframe.domain.ports.property_access import PropertyContextProtocol, Reader, Writer
from boframe.domain.ports.remote import RemotePort
from boframe.domain.ports.user import UserProtocol, UserReader

__all__ = [
    "DataTypeProtocol",
    "MessageLookupProtocol",
    "PropertyContextProtocol",
    "Reader",
    "RemotePort",
    "UserProtocol",
    "UserReader",
    "Writer",
]
