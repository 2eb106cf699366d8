"""Storing the list of subscribed chats in a YAML file."""

from __future__ import annotations

import os
from typing import Union

import yaml

from .models import Subscribers

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def parse_subscribers(data: Union[str, bytes]) -> Subscribers:
    """Build :class:`Subscribers` from a YAML document."""
    raw = yaml.safe_load(data)
    if raw is None:
        return Subscribers()
    if not isinstance(raw, dict):
        raise ValueError("the subscribers document must be a mapping")

    ids = raw.get("subscribers")
    if ids is None:
        return Subscribers()
    if not isinstance(ids, list) or any(
        isinstance(i, bool) or not isinstance(i, int) or not _INT64_MIN <= i <= _INT64_MAX
        for i in ids
    ):
        raise ValueError("subscribers must be a list of 64-bit integers")
    return Subscribers(chat_ids=list(ids))


def dump_subscribers(subscribers: Subscribers) -> str:
    """Serialise subscribers to YAML."""
    return yaml.safe_dump(
        {"subscribers": list(subscribers.chat_ids)}, default_flow_style=False
    )


def load_subscribers(path: Union[str, os.PathLike]) -> Subscribers:
    """Read subscribers from ``path``; a missing file means no subscribers."""
    try:
        with open(path, "rb") as handle:
            data = handle.read()
    except FileNotFoundError:
        return Subscribers()
    return parse_subscribers(data)


def save_subscribers(subscribers: Subscribers, path: Union[str, os.PathLike]) -> None:
    """Write subscribers to ``path``."""
    text = dump_subscribers(subscribers)
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o755)
    with os.fdopen(fd, "w", encoding="utf-8") as handle:
        handle.write(text)