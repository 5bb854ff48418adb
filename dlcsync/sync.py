# Copyright 2022 Francis Meyvis (pwsync@mikmak.fun)

"""Difference operation between the configured and the server's download clients"""

import asyncio
from copy import deepcopy
from dataclasses import dataclass, field
from json import dumps
from logging import getLogger
from typing import Any, Dict, Iterable, List, Mapping, Optional

from diffsync.enum import DiffSyncActions
from diffsync.logging import enable_console_logging

from .api_client import DownloadClientApi
from .common import ID, LOGGER_NAME, NAME, TAGS, DlcCompareInfo
from .dataset import DownloadClientDataset
from .model import FIELD_SET, TAG_SET
from .record import Record, canonical, field_map


@dataclass
class ChangedClient:
    """A server download client and the payload that brings it in line with the config"""

    id: str
    payload: Record


@dataclass
class DownloadClientsDiff:
    """What to create, delete and update on the server"""

    # config entries without server counterpart
    missing_on_server: List[Record] = field(default_factory=list)
    # server records without config entry
    not_available_anymore: List[Record] = field(default_factory=list)
    # server records that differ from their config entry
    changed: List[ChangedClient] = field(default_factory=list)

    def is_empty(self) -> bool:
        """true when there is nothing to do"""
        return not (self.missing_on_server or self.not_available_anymore or self.changed)

    def to_dict(self) -> Dict[str, Any]:
        """the diff with the server API's naming"""
        return {
            "missingOnServer": self.missing_on_server,
            "notAvailableAnymore": self.not_available_anymore,
            "changed": [{"id": c.id, "payload": c.payload} for c in self.changed],
        }


def _to_json(value: Any) -> str:
    return dumps(value, default=str)


def build_update_payload(server: Mapping, entry: Mapping) -> Record:
    """returns the server record with the config entry's properties applied.

    Properties only known by the server are kept and
    the server's id is never overwritten.
    """
    payload = {}
    for prop, value in server.items():
        payload[prop] = deepcopy(value)
    for prop, value in entry.items():
        if prop == ID:
            continue
        payload[prop] = deepcopy(value)
    return payload


class DownloadClientSyncer:
    """Difference between the configured and the server's download clients"""

    def __init__(self, compare_info: Optional[DlcCompareInfo] = None, verbosity: int = 0):
        self._logger = getLogger(LOGGER_NAME)
        self._compare_info = compare_info or DlcCompareInfo()

        # 0 for WARNING logs, 1 for INFO logs, 2 for DEBUG logs
        enable_console_logging(verbosity=verbosity)

    def diff(self, config_entries: Iterable[Mapping], server_list: Iterable[Mapping]) -> Optional[DownloadClientsDiff]:
        """calculates differences, returns None when the server is in sync with the config"""

        config_ds = DownloadClientDataset("config", config_entries, self._compare_info)
        server_ds = DownloadClientDataset("server", server_list, self._compare_info)
        config_ds.load()
        server_ds.load()

        diff = config_ds.diff_to(server_ds)
        self._logger.debug("diff.summary: %s", diff.summary())

        updates = {}
        for diff_element in diff.get_children():
            self._logger.debug("action: %s %s", diff_element.action, diff_element.name)
            if diff_element.action == DiffSyncActions.UPDATE:
                updates[diff_element.name] = diff_element

        result = DownloadClientsDiff()
        for key, entry in config_ds.index.items():
            if key not in server_ds.index:
                result.missing_on_server.append(entry)

        for key, server in server_ds.index.items():
            entry = config_ds.index.get(key)
            if entry is None:
                result.not_available_anymore.append(server)
            elif key in updates:
                self._log_mismatches(updates[key], server, entry)
                if server.get(ID) is None:
                    self._logger.warning("DownloadClient '%s' on server has no id, cannot update it", server.get(NAME))
                    continue
                result.changed.append(ChangedClient(str(server.get(ID)), build_update_payload(server, entry)))
            else:
                self._logger.info("DownloadClient '%s' matches server config, no update needed.", entry.get(NAME))

        if result.is_empty():
            self._logger.info("Download clients are in sync.")
            return None

        self._logger.debug("missing_on_server: %s", result.missing_on_server)
        self._logger.debug("not_available_anymore: %s", result.not_available_anymore)
        self._logger.debug("changed: %s", result.changed)
        return result

    def _log_mismatches(self, diff_element, server: Mapping, entry: Mapping):
        # "+" holds the config side ("source"), "-" the server side ("dest")
        for attr in sorted(diff_element.get_attrs_diffs().get("+", {})):
            if attr == TAG_SET:
                self._logger.info(
                    "DownloadClient mismatch tags server=%s entry=%s",
                    _to_json(server.get(TAGS)),
                    _to_json(entry.get(TAGS)),
                )
            elif attr == FIELD_SET:
                server_fields = field_map(server, self._compare_info)
                entry_fields = field_map(entry, self._compare_info)
                for name in sorted(set(server_fields) | set(entry_fields), key=repr):
                    if name not in entry_fields:
                        self._logger.info("DownloadClient missing field in entry: '%s'", name)
                    elif name not in server_fields:
                        self._logger.info("DownloadClient extra field in entry: '%s'", name)
                    elif canonical(server_fields[name]) != canonical(entry_fields[name]):
                        self._logger.info(
                            "DownloadClient mismatch field '%s' server=%s entry=%s",
                            name,
                            _to_json(server_fields[name]),
                            _to_json(entry_fields[name]),
                        )
            else:
                self._logger.info(
                    "DownloadClient mismatch key='%s' server=%s entry=%s",
                    attr,
                    _to_json(server.get(attr)),
                    _to_json(entry.get(attr)),
                )


async def calculate_download_clients_diff(
    config_entries: List[Mapping],
    client: DownloadClientApi,
    compare_info: Optional[DlcCompareInfo] = None,
) -> Optional[DownloadClientsDiff]:
    """fetches the server's download clients and compares them with the config entries"""
    server_list = await asyncio.to_thread(client.read)
    return DownloadClientSyncer(compare_info).diff(config_entries, server_list)
