# Copyright 2022 Francis Meyvis (pwsync@mikmak.fun)

"""Download client Synchronization package"""

import sys

assert sys.version_info >= (3, 9)

from .api_client import DownloadClientApi
from .arr_api import ArrApiClient
from .common import DlcCompareInfo, DlcConfigError, DlcNotFound, DlcUnsupported
from .config import DlcConfig, load_config
from .dataset import DownloadClientDataset
from .record import index_records, make_key
from .sync import ChangedClient, DownloadClientsDiff, DownloadClientSyncer, calculate_download_clients_diff
