"""Email collection, aggregate statistics and audit trail."""

from .collection import EmailCollection
from .events import EventLog, EventRecorder, LoggingEventRecorder, make_event

__all__ = ["EmailCollection", "EventLog", "EventRecorder", "LoggingEventRecorder", "make_event"]
