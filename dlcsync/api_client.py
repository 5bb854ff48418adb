# Copyright 2022 Francis Meyvis (pwsync@mikmak.fun)

"""Abstract CRUD operations on download clients that a server API needs to implement"""

from abc import ABC, abstractmethod
from typing import List, Mapping

from .common import DlcUnsupported
from .record import Record


class DownloadClientApi(ABC):
    """Define abstract CRUD operations on a server's download clients"""

    @abstractmethod
    def create(self, entry: Mapping) -> Record:
        """create a download client on the server, based on given config entry"""
        raise DlcUnsupported("DownloadClientApi.create")

    @abstractmethod
    def read(self) -> List[Record]:
        """read all download clients from the server"""
        raise DlcUnsupported("DownloadClientApi.read")

    @abstractmethod
    def update(self, client_id: str, payload: Mapping) -> Record:
        """update the download client with given id with the values in given payload"""
        raise DlcUnsupported("DownloadClientApi.update")

    @abstractmethod
    def delete(self, client_id: str) -> None:
        """delete the download client with given id from the server"""
        raise DlcUnsupported("DownloadClientApi.delete")
