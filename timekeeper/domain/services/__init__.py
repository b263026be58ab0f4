"""
Domain services.
Stateless business rules shared by the use cases.
"""

from .entry_validator import EntryValidator, EntryInput, ParsedEntry
from .report_aggregator import ReportAggregator
from .access_gate import AccessGate

__all__ = [
    "EntryValidator",
    "EntryInput",
    "ParsedEntry",
    "ReportAggregator",
    "AccessGate",
]
