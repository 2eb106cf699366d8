import pytest

from pricewatcher.bot_service import process_messages, start
from pricewatcher.models import Command, Message


class FakeBroker:
    def __init__(self, messages, fail_send=False, fail_start=False):
        self._messages = messages
        self.fail_send = fail_send
        self.fail_start = fail_start
        self.sent = []
        self.committed = []
        self.stopped = False
        self.service_name = None

    async def _stream(self):
        for msg in self._messages:
            yield msg

    async def start(self, service_name):
        if self.fail_start:
            raise RuntimeError("cannot register")
        self.service_name = service_name
        return self._stream()

    def stop(self):
        self.stopped = True

    async def send_message(self, msg, chat_id):
        if self.fail_send:
            raise RuntimeError("send failed")
        self.sent.append((msg, chat_id))

    async def commit_message(self, msg_uuid):
        self.committed.append(msg_uuid)


PING = Command("ping", "Reply pong", lambda msg: f"pong {msg.value}")


@pytest.mark.asyncio
async def test_matching_command_is_answered_and_committed():
    msg = Message(chat_id=7, command="ping", value="x")
    broker = FakeBroker([msg])
    await process_messages(broker, broker._stream(), [PING])
    assert broker.sent == [("pong x", 7)]
    assert broker.committed == [msg.msg_uuid]


@pytest.mark.asyncio
async def test_unknown_command_is_only_committed():
    msg = Message(chat_id=7, command="other")
    broker = FakeBroker([msg])
    await process_messages(broker, broker._stream(), [PING])
    assert broker.sent == []
    assert broker.committed == [msg.msg_uuid]


@pytest.mark.asyncio
async def test_send_failure_still_commits():
    msgs = [Message(chat_id=1, command="ping"), Message(chat_id=2, command="ping")]
    broker = FakeBroker(msgs, fail_send=True)
    await process_messages(broker, broker._stream(), [PING])
    assert broker.committed == [m.msg_uuid for m in msgs]


@pytest.mark.asyncio
async def test_start_serves_and_stops():
    broker = FakeBroker([Message(chat_id=4, command="ping", value="y")])
    await start(broker, "price-watcher", [PING])
    assert broker.service_name == "price-watcher"
    assert broker.sent == [("pong y", 4)]
    assert broker.stopped is True


@pytest.mark.asyncio
async def test_start_failure_propagates_without_stop():
    broker = FakeBroker([], fail_start=True)
    with pytest.raises(RuntimeError, match="cannot register"):
        await start(broker, "price-watcher", [PING])
    assert broker.stopped is False