import uuid

from pricewatcher.models import Command, Config, Message, Page, Subscribers


def test_message_defaults_and_unique_ids():
    first = Message(chat_id=1, command="start")
    second = Message(chat_id=1, command="start")
    assert first.value == ""
    assert first.msg_uuid != second.msg_uuid
    assert isinstance(first.msg_uuid, uuid.UUID) and first.msg_uuid.version == 4


def test_config_defaults_are_independent():
    a = Config()
    b = Config()
    a.sending_hours.append(10)
    assert a.kafka_address == ""
    assert b.sending_hours == []


def test_subscribers_default_empty_and_independent():
    a = Subscribers()
    b = Subscribers()
    a.chat_ids.append(42)
    assert a.chat_ids == [42]
    assert b.chat_ids == []


def test_command_action_is_called_with_message():
    cmd = Command("echo", "Echo the value", lambda msg: msg.value.upper())
    assert cmd.action(Message(chat_id=3, command="echo", value="abc")) == "ABC"
    assert Page(body="<div></div>").body == "<div></div>"