# Copyright 2022 Francis Meyvis (pwsync@mikmak.fun)

"""CRUD operations on the download clients of a Sonarr/Radarr-like (*arr) server"""

# The REST API is described here:
# https://sonarr.tv/docs/api/#/DownloadClient
# https://radarr.video/docs/api/#/DownloadClient

from functools import wraps
from logging import getLogger
from time import time
from typing import List, Mapping

import requests

from .api_client import DownloadClientApi
from .common import LOGGER_NAME, DlcUnsupported
from .record import Record

DEFAULT_API_VERSION = "v3"
API_KEY_HEADER = "X-Api-Key"
DEFAULT_TIMEOUT = 30  # seconds


def eet(fun):
    """Trace enter and exit of callable with timing"""

    @wraps(fun)
    def wrapper(*args, **kwargs):
        logger = getLogger(LOGGER_NAME)

        logger.debug("ENT %s", fun.__name__)

        start = time()
        out = fun(*args, **kwargs)
        duration = time() - start

        if duration < 1e-03:
            duration = f"{int(duration*1000000)}us"
        elif duration < 1:
            duration = f"{int(duration*1000)}ms"
        else:
            duration = f"{int(duration)}s"

        logger.debug("FIN %s", f"{fun.__name__} : {duration}")
        return out

    return wrapper


class ArrApiClient(DownloadClientApi):
    """Implements the CRUD operations on the download clients of an *arr server,
    using its REST API"""

    def __init__(
        self,
        url: str,
        api_key: str,
        api_version: str = DEFAULT_API_VERSION,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        super().__init__()
        self._logger = getLogger(LOGGER_NAME)
        self._base_url = f"{url.rstrip('/')}/api/{api_version}/downloadclient"
        self._timeout = timeout
        self._session = requests.Session()
        self._session.headers.update({API_KEY_HEADER: api_key, "Accept": "application/json"})

    @eet
    def _request(self, method: str, path: str = "", payload=None):
        url = self._base_url + path
        response = self._session.request(method, url, json=payload, timeout=self._timeout)
        try:
            response.raise_for_status()
        except requests.HTTPError as exc:
            self._logger.error("%s %s, status: %s, body: %s", method, url, response.status_code, response.text)
            raise exc
        self._logger.debug("%s %s, status: %s", method, url, response.status_code)
        return response.json() if response.content else None

    def read(self) -> List[Record]:
        """reads all the server's download clients"""
        clients = self._request("GET")
        if not isinstance(clients, list):
            raise DlcUnsupported(f"expected a list of download clients, got: {type(clients).__name__}")
        return clients

    def create(self, entry: Mapping) -> Record:
        """creates a download client based on given config entry"""
        return self._request("POST", payload=dict(entry))

    def update(self, client_id: str, payload: Mapping) -> Record:
        """updates the download client with given id"""
        return self._request("PUT", f"/{client_id}", dict(payload))

    def delete(self, client_id: str) -> None:
        """deletes the download client with given id"""
        self._request("DELETE", f"/{client_id}")

    def close(self):
        """releases the HTTP connections"""
        self._session.close()
