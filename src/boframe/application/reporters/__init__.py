"""Reporters for broken-rules responses."""

from boframe.application.reporters.console import ConsoleConfig, ConsoleReporter
from boframe.application.reporters.json import JsonReporter
from boframe.application.reporters.protocol import ReporterProtocol

__all__ = [
    "ConsoleConfig",
    "ConsoleReporter",
    "JsonReporter",
    "ReporterProtocol",
]
