"""Event classification, dispatch and handlers.

Key Components:
    - classify_event: Map webhook name, action and payload shape to an EventKind
    - WebhookDispatcher: Actor guard and handler routing
    - EventHandler: Base class for the four workflow handlers

Example:
    >>> from translation_bot.engine import WebhookDispatcher
    >>> dispatcher = WebhookDispatcher(tracker, settings)
    >>> await dispatcher.dispatch("issue_comment", payload)
"""

from translation_bot.engine.dispatcher import WebhookDispatcher
from translation_bot.engine.event_classifier import ClassifiedEvent, EventKind, classify_event

__all__ = [
    "ClassifiedEvent",
    "EventKind",
    "WebhookDispatcher",
    "classify_event",
]
