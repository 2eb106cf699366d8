"""Watching the gold price and sending it to subscribers."""

from __future__ import annotations

import asyncio
import logging
import random
from datetime import datetime, timedelta
from typing import Awaitable, Callable, Optional

from .models import BrokerWorker, Config, Extractor, Requester, Subscribers
from .timing import dur_to_send_message, get_wait_dur_with_random_comp

logger = logging.getLogger(__name__)


def format_price_message(price: float) -> str:
    """Return the text sent to subscribers."""
    return f"Курс золота. Продажа: {price:.2f}р"


class BankService:
    """Periodically fetches the price and sends it at the configured hours."""

    def __init__(
        self,
        requester: Requester,
        extractor: Extractor,
        config: Config,
        *,
        rng: Optional[random.Random] = None,
        clock: Optional[Callable[[], datetime]] = None,
        sleep: Optional[Callable[[float], Awaitable[object]]] = None,
    ) -> None:
        self._requester = requester
        self._extractor = extractor
        self._config = config
        self._rng = rng
        self._clock = clock or datetime.now
        self._sleep = sleep or asyncio.sleep

    def wait_duration(self, now: datetime) -> timedelta:
        """Return how long to wait before the next fetch."""
        dur = get_wait_dur_with_random_comp(now, self._config.sending_hours, self._rng)
        logger.info("Waiting %s", dur)
        return dur

    def get_message_with_price(self) -> str:
        """Fetch the page and return the message with the current price."""
        logger.info("Start processing a price")
        page = self._requester.request_page()
        price = self._extractor.extract_price(page.body)
        return format_price_message(price)

    async def serve_price(self, broker: BrokerWorker, subscribers: Subscribers) -> None:
        """Fetch the price, wait for the sending hour and send it to every subscriber."""
        try:
            msg = await asyncio.to_thread(self.get_message_with_price)
        except Exception:
            logger.exception("An error occurs while serving a price")
            return

        logger.info("The price is processed")
        if not msg:
            logger.info("A message of the processed price is empty")
            return

        dur = dur_to_send_message(self._clock(), self._config.sending_hours)
        logger.info("Waiting the time to send a message: %s", dur)
        try:
            await self._sleep(max(dur.total_seconds(), 0.0))
        except asyncio.CancelledError:
            logger.info("Interrupting waiting the time when to send a message")
            raise

        for chat_id in list(subscribers.chat_ids):
            try:
                await broker.send_message(msg, chat_id)
            except Exception:
                logger.exception("Cannot send the price to chat %s", chat_id)

    async def watch_price(self, broker: BrokerWorker, subscribers: Subscribers) -> None:
        """Serve the price at every sending hour until cancelled."""
        while True:
            await self._sleep(self.wait_duration(self._clock()).total_seconds())
            await self.serve_price(broker, subscribers)