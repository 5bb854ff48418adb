# Copyright 2022 Francis Meyvis (pwsync@mikmak.fun)

"""description of the model for DiffSync"""
# https://blog.networktocode.com/post/intro-to-diffing-and-syncing-data-with-diffsync/

# pylint: disable=invalid-name

from typing import Any, Tuple

from diffsync import DiffSyncModel

from .common import SCALAR_PROPS

KEY = "key"
TAG_SET = "tag_set"
FIELD_SET = "field_set"


class DownloadClient(DiffSyncModel):
    """Comparable form of a download client, from the config or from the server.

    The attribute values are canonical forms (see record.canonical)
    so that DiffSync's != means "semantically different".
    """

    _modelname = "download_client"

    # identifies the same download client in the config and on the server
    _identifiers = (KEY,)

    # check modifications on these properties:
    _attributes = SCALAR_PROPS + (TAG_SET, FIELD_SET)

    key: str
    configContract: Any = None
    enable: Any = None
    implementation: Any = None
    implementationName: Any = None
    infoLink: Any = None
    name: Any = None
    priority: Any = None
    protocol: Any = None
    removeCompletedDownloads: Any = None
    removeFailedDownloads: Any = None
    tag_set: Tuple[str, ...] = ()
    field_set: Tuple[Any, ...] = ()
