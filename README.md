# pricewatcher

`pricewatcher` provides the pieces of a service that watches a bank's gold
selling price and sends it to subscribed chats at chosen hours: reading the
price out of an HTML page, working out when to fetch and when to send,
keeping the list of subscribers in YAML, answering `start` / `stop` bot
commands, and asyncio loops that tie these together through a message broker
interface you supply.

## Installation

```
pip install .
pip install ".[test]"   # with pytest and pytest-asyncio
```

## Modules

| Module | Contents |
| --- | --- |
| `pricewatcher.models` | `Page`, `Message`, `Command`, `Config`, `Subscribers`; the `Requester`, `Extractor` and `BrokerWorker` protocols |
| `pricewatcher.timing` | `get_call_time`, `dur_to_send_message`, `get_wait_dur_with_random_comp`, `random_dur_sec` |
| `pricewatcher.extractor` | `PriceExtractor`, `parse_price`, `ExtractionError` |
| `pricewatcher.config` | `Configer`, `parse_config` |
| `pricewatcher.subscribers` | `load_subscribers`, `save_subscribers`, `parse_subscribers`, `dump_subscribers` |
| `pricewatcher.commands` | `create_sub_command`, `create_unsub_command`, `create_commands` |
| `pricewatcher.interruption` | `watch_for_interruption` |
| `pricewatcher.bot_service` | `start`, `process_messages` |
| `pricewatcher.bank_service` | `BankService`, `format_price_message` |

## Configuration

`Configer(path).get_config()` reads a YAML file such as:

```yaml
kafkaAddress: localhost:9092
sending_hours: [9, 13, 18]
```

and returns a `Config(kafka_address=..., sending_hours=[...])`. Missing keys
give an empty string and an empty list. A document that is not a mapping, a
non-string `kafkaAddress` or a `sending_hours` that is not a list of integers
raises `ValueError`; a missing file raises `FileNotFoundError`.
`parse_config(data)` does the same for a string or bytes.

## Subscribers

Subscribers are stored as:

```yaml
subscribers:
- 1001
- 1002
```

`load_subscribers(path)` returns an empty `Subscribers` when the file does not
exist; `save_subscribers(subscribers, path)` writes the file (created with mode
`0o755`). `parse_subscribers` raises `ValueError` unless the document is a
mapping whose `subscribers` entry is a list of 64-bit integers.

## Timing

- `get_call_time(now, call_hours)` returns the first hour in `call_hours`
  that is greater than `now.hour`, on the same day, at minute zero; if there is
  none, the first hour in the list on the next day. List the hours in
  ascending order. An empty list raises `ValueError`.
- `dur_to_send_message(now, call_hours)` is the time from `now` to that moment.
- `get_wait_dur_with_random_comp(now, call_hours, rng=None)` is the same
  duration less a random margin of 0–1799 whole seconds plus three minutes,
  and never negative. Pass a `random.Random` to make it repeatable.

## Extracting the price

`PriceExtractor(page_reg=r"([0-9]).*([0-9])*,([0-9])*", tag="div")` parses an
HTML document (a string or a text file object) and takes the first text node
whose direct parent is `tag` and that the regular expression matches. It
raises `ExtractionError` when there is none. The text goes through
`parse_price`, which removes non-breaking spaces, turns a comma into a decimal
point and returns the value rounded to single precision; text that is still
not a number gives `0.0`.

```python
from pricewatcher.extractor import PriceExtractor
from pricewatcher.bank_service import format_price_message

price = PriceExtractor().extract_price("<div>5\u00a0123,45</div>")
print(format_price_message(price))   # Курс золота. Продажа: 5123.45р
```

## Bot commands

`create_commands(subscribers)` returns two `Command` objects sharing one lock:

- `start` adds the message's chat to `subscribers.chat_ids` and answers
  `The user is subscribed for current gold price notifications!`, or
  `The user is already subscribed!`.
- `stop` removes it and answers
  `The user is unsubscribed from current gold price notifications!`, or
  `The user is not subscribed!`.

## Services

Both services are coroutines that run until cancelled.

- `bot_service.start(broker, service_name, commands)` awaits
  `broker.start(service_name)` for an async stream of `Message` objects and
  hands it to `process_messages`, calling `broker.stop()` when it ends. Every
  message is answered by each command of the same name through
  `broker.send_message`, then committed with `broker.commit_message`; failures
  of either are logged, not raised.
- `BankService(requester, extractor, config, *, rng=None, clock=None,
  sleep=None).watch_price(broker, subscribers)` repeatedly sleeps for
  `wait_duration(now)`, then calls `serve_price`: it fetches the page and
  builds the message in a worker thread (`get_message_with_price`), sleeps
  until the next sending hour and sends the message to every subscribed chat.
  Errors while fetching or sending are logged and the loop goes on.

`watch_for_interruption(*cancels)` installs SIGINT and SIGTERM handlers that
call each given function once, on the first signal.

```python
import asyncio
from pricewatcher.config import Configer
from pricewatcher.subscribers import load_subscribers, save_subscribers
from pricewatcher.commands import create_commands
from pricewatcher.extractor import PriceExtractor
from pricewatcher.bank_service import BankService
from pricewatcher import bot_service

async def run(requester, broker):
    config = Configer("price-watcher-data/config.yml").get_config()
    subscribers = load_subscribers("price-watcher-data/subscribers.yml")
    commands = create_commands(subscribers)
    service = BankService(requester, PriceExtractor(), config)
    try:
        await asyncio.gather(
            bot_service.start(broker, "price-watcher", commands),
            service.watch_price(broker, subscribers),
        )
    finally:
        save_subscribers(subscribers, "price-watcher-data/subscribers.yml")
```

## What the package does not do

- It does not download the price page. Supply an object with a
  `request_page()` method returning a `Page` (the `Requester` protocol).
- It has no message broker or chat bot client. Supply an object implementing
  the `BrokerWorker` protocol: `start`, `stop`, `send_message` and
  `commit_message`.
- It installs no command-line program; you write the small script that wires
  the pieces together, as above.