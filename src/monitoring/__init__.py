"""
Search trace plumbing: events, in-process bus, JSONL file sink.
"""

from __future__ import annotations

from .bus import EventBus, SubscriberFn
from .events import EventType, MonitoringEvent
from .logger import JsonFileLogger, log_event

__all__ = [
    "EventBus",
    "SubscriberFn",
    "EventType",
    "MonitoringEvent",
    "JsonFileLogger",
    "log_event",
]
