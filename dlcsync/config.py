# Copyright 2022 Francis Meyvis (pwsync@mikmak.fun)

"""Loads the desired download clients from a YAML config file"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from logging import getLogger
from os.path import exists
from typing import FrozenSet, List, Optional

import yaml

from .common import LOGGER_NAME, SENSITIVE_FIELD_NAMES, DlcConfigError, DlcNotFound
from .record import Record

DOWNLOAD_CLIENTS = "download_clients"
SENSITIVE_FIELDS = "sensitive_fields"


@dataclass
class DlcConfig:
    """the config file's contents"""

    download_clients: List[Record] = field(default_factory=list)
    sensitive_fields: FrozenSet[str] = SENSITIVE_FIELD_NAMES


def _check_download_clients(clients) -> List[Record]:
    if clients is None:
        return []
    if not isinstance(clients, list):
        raise DlcConfigError(f"'{DOWNLOAD_CLIENTS}' must be a list, got: {type(clients).__name__}")
    for pos, client in enumerate(clients):
        if not isinstance(client, Mapping):
            raise DlcConfigError(f"'{DOWNLOAD_CLIENTS}' entry {pos} must be a mapping, got: {client!r}")
    return [dict(client) for client in clients]


def _check_sensitive_fields(names) -> Optional[FrozenSet[str]]:
    if names is None:
        return None
    if not isinstance(names, list) or not all(isinstance(n, str) for n in names):
        raise DlcConfigError(f"'{SENSITIVE_FIELDS}' must be a list of field names")
    return frozenset(names)


def load_config(filename: str) -> DlcConfig:
    """reads the download client entries (and optional sensitive field names) from given YAML file"""
    if not exists(filename):
        raise DlcNotFound(filename)

    with open(filename, "r", encoding="utf-8") as fp:
        try:
            data = yaml.safe_load(fp)
        except yaml.YAMLError as err:
            raise DlcConfigError(f"{filename}: {err}") from err

    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        raise DlcConfigError(f"{filename}: expected a mapping at the top level")

    config = DlcConfig(_check_download_clients(data.get(DOWNLOAD_CLIENTS)))
    sensitive_fields = _check_sensitive_fields(data.get(SENSITIVE_FIELDS))
    if sensitive_fields is not None:
        config.sensitive_fields = sensitive_fields

    getLogger(LOGGER_NAME).info("%s: %d download client(s)", filename, len(config.download_clients))
    return config
