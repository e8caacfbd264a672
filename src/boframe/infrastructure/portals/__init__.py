"""Remote portal adapters implementing RemotePort."""

from boframe.infrastructure.portals.local import LocalPortal

__all__ = ["LocalPortal"]
