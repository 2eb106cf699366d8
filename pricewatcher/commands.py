"""Bot commands for subscribing to and unsubscribing from price messages."""

from __future__ import annotations

import threading
from typing import ContextManager

from .models import Command, Message, Subscribers

_SUBSCRIBED = "The user is subscribed for current gold price notifications!"
_ALREADY_SUBSCRIBED = "The user is already subscribed!"
_UNSUBSCRIBED = "The user is unsubscribed from current gold price notifications!"
_NOT_SUBSCRIBED = "The user is not subscribed!"


def create_sub_command(lock: ContextManager, subscribers: Subscribers) -> Command:
    """Return the ``start`` command that subscribes the sending chat."""

    def subscribe(msg: Message) -> str:
        with lock:
            if msg.chat_id in subscribers.chat_ids:
                return _ALREADY_SUBSCRIBED
            subscribers.chat_ids.append(msg.chat_id)
            return _SUBSCRIBED

    return Command(
        name="start",
        description="Start getting messages of the current gold price ",
        action=subscribe,
    )


def create_unsub_command(lock: ContextManager, subscribers: Subscribers) -> Command:
    """Return the ``stop`` command that unsubscribes the sending chat."""

    def unsubscribe(msg: Message) -> str:
        with lock:
            if msg.chat_id not in subscribers.chat_ids:
                return _NOT_SUBSCRIBED
            subscribers.chat_ids.remove(msg.chat_id)
            return _UNSUBSCRIBED

    return Command(
        name="stop",
        description="Stop getting notifications about the current gold price ",
        action=unsubscribe,
    )


def create_commands(subscribers: Subscribers) -> list[Command]:
    """Return both commands sharing one lock over ``subscribers``."""
    lock = threading.Lock()
    return [create_sub_command(lock, subscribers), create_unsub_command(lock, subscribers)]