# Copyright 2022 Francis Meyvis (pwsync@mikmak.fun)

"""A DownloadClient dataset from a list of download client records"""

from logging import getLogger
from typing import Dict, Iterable, Mapping, Optional

from diffsync import Adapter

from .common import LOGGER_NAME, DlcCompareInfo
from .model import DownloadClient
from .record import comparable_fields, comparable_props, index_records, tag_set


class DownloadClientDataset(Adapter):
    """Load download clients from config entries or server records"""

    top_level = ["download_client"]
    download_client = DownloadClient

    def __init__(self, name: str, records: Iterable[Mapping], compare_info: Optional[DlcCompareInfo] = None):
        super().__init__(name)
        self._logger = getLogger(LOGGER_NAME)
        self._compare_info = compare_info or DlcCompareInfo()
        self._records = list(records)
        # key to record, in the order of the records (last duplicate wins)
        self.index: Dict[str, Mapping] = {}

    def load(self):
        self.index = index_records(self._records, self._compare_info)
        if len(self.index) != len(self._records):
            self._logger.debug("%s: %d duplicate key(s) ignored", self.name, len(self._records) - len(self.index))

        for key, record in self.index.items():
            client = DownloadClient(
                key=key,
                tag_set=tag_set(record),
                field_set=comparable_fields(record, self._compare_info),
                **comparable_props(record),
            )
            self.add(client)
