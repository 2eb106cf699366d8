"""Loading the application configuration from YAML."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Union

import yaml

from .models import Config


def parse_config(data: Union[str, bytes]) -> Config:
    """Build a :class:`Config` from a YAML document."""
    raw = yaml.safe_load(data)
    if raw is None:
        return Config()
    if not isinstance(raw, dict):
        raise ValueError("the config document must be a mapping")

    address = raw.get("kafkaAddress")
    if address is None:
        address = ""
    elif not isinstance(address, str):
        raise ValueError("kafkaAddress must be a string")

    hours = raw.get("sending_hours")
    if hours is None:
        hours = []
    elif not isinstance(hours, list) or any(
        isinstance(hour, bool) or not isinstance(hour, int) for hour in hours
    ):
        raise ValueError("sending_hours must be a list of integers")

    return Config(kafka_address=address, sending_hours=list(hours))


@dataclass(frozen=True)
class Configer:
    """Reads the configuration from a file."""

    path: Union[str, os.PathLike]

    def get_config(self) -> Config:
        """Read and parse the configuration file."""
        return parse_config(Path(self.path).read_bytes())