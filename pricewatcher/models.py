"""Core data types and the interfaces the services depend on."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import AsyncIterator, Callable, Protocol, TextIO, Union, runtime_checkable


@dataclass(frozen=True)
class Page:
    """A downloaded page holding the current price."""

    body: str


@dataclass(frozen=True)
class Message:
    """A bot command received from a chat."""

    chat_id: int
    command: str
    value: str = ""
    msg_uuid: uuid.UUID = field(default_factory=uuid.uuid4)


@dataclass(frozen=True)
class Command:
    """A bot command and the action that answers it."""

    name: str
    description: str
    action: Callable[[Message], str]


@dataclass
class Config:
    """Application settings."""

    kafka_address: str = ""
    sending_hours: list[int] = field(default_factory=list)


@dataclass
class Subscribers:
    """Chats that receive price notifications."""

    chat_ids: list[int] = field(default_factory=list)


@runtime_checkable
class Requester(Protocol):
    """Fetches the page with the current price."""

    def request_page(self) -> Page:
        """Return the page; raise on failure."""


@runtime_checkable
class Extractor(Protocol):
    """Pulls a price out of a page body."""

    def extract_price(self, body: Union[str, TextIO]) -> float:
        """Return the price found in ``body``; raise if there is none."""


@runtime_checkable
class BrokerWorker(Protocol):
    """Message broker connecting the service with the bot."""

    async def start(self, service_name: str) -> AsyncIterator[Message]:
        """Register commands and return the stream of incoming messages."""

    def stop(self) -> None:
        """Stop the broker."""

    async def send_message(self, msg: str, chat_id: int) -> None:
        """Send a text to a chat; raise when it cannot be delivered."""

    async def commit_message(self, msg_uuid: uuid.UUID) -> None:
        """Mark an incoming message as processed."""