import threading

from pricewatcher.commands import create_commands, create_sub_command, create_unsub_command
from pricewatcher.models import Message, Subscribers


def test_subscribe_new_user():
    subs = Subscribers()
    cmd = create_sub_command(threading.Lock(), subs)
    result = cmd.action(Message(chat_id=5, command="start"))
    assert result == "The user is subscribed for current gold price notifications!"
    assert subs.chat_ids == [5]
    assert cmd.name == "start"


def test_subscribe_twice():
    subs = Subscribers([5])
    cmd = create_sub_command(threading.Lock(), subs)
    assert cmd.action(Message(chat_id=5, command="start")) == "The user is already subscribed!"
    assert subs.chat_ids == [5]


def test_unsubscribe_empty():
    subs = Subscribers()
    cmd = create_unsub_command(threading.Lock(), subs)
    assert cmd.action(Message(chat_id=5, command="stop")) == "The user is not subscribed!"
    assert cmd.name == "stop"


def test_unsubscribe_unknown_user_keeps_others():
    subs = Subscribers([1, 2])
    cmd = create_unsub_command(threading.Lock(), subs)
    assert cmd.action(Message(chat_id=3, command="stop")) == "The user is not subscribed!"
    assert subs.chat_ids == [1, 2]


def test_unsubscribe_present_user():
    subs = Subscribers([1, 2, 3])
    cmd = create_unsub_command(threading.Lock(), subs)
    result = cmd.action(Message(chat_id=2, command="stop"))
    assert result == "The user is unsubscribed from current gold price notifications!"
    assert subs.chat_ids == [1, 3]


def test_create_commands_share_subscribers():
    subs = Subscribers()
    start, stop = create_commands(subs)
    assert [start.name, stop.name] == ["start", "stop"]
    start.action(Message(chat_id=9, command="start"))
    assert subs.chat_ids == [9]
    stop.action(Message(chat_id=9, command="stop"))
    assert subs.chat_ids == []