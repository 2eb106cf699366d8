"""Serving bot commands arriving through the broker."""

from __future__ import annotations

import logging
from typing import AsyncIterable, Sequence

from .models import BrokerWorker, Command, Message

logger = logging.getLogger(__name__)


async def process_messages(
    broker: BrokerWorker, messages: AsyncIterable[Message], commands: Sequence[Command]
) -> None:
    """Answer each message with the matching commands and commit it."""
    async for msg in messages:
        for cmd in commands:
            if cmd.name != msg.command:
                continue
            result = cmd.action(msg)
            try:
                await broker.send_message(result, msg.chat_id)
            except Exception:
                logger.exception("Can not send a message")

        try:
            await broker.commit_message(msg.msg_uuid)
        except Exception:
            logger.exception("Can not commit a message")


async def start(broker: BrokerWorker, service_name: str, commands: Sequence[Command]) -> None:
    """Start the broker and serve messages until cancelled, then stop the broker."""
    messages = await broker.start(service_name)
    try:
        await process_messages(broker, messages, commands)
    finally:
        broker.stop()