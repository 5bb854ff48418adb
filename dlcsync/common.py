# Copyright 2022 Francis Meyvis (pwsync@mikmak.fun)

"""common constants and helper functions"""

from dataclasses import dataclass, field
from typing import FrozenSet

LOGGER_NAME = "DLCSYNC"

ID = "id"
NAME = "name"
IMPLEMENTATION = "implementation"
IMPLEMENTATION_NAME = "implementationName"
CONFIG_CONTRACT = "configContract"
PROTOCOL = "protocol"
ENABLE = "enable"
PRIORITY = "priority"
REMOVE_COMPLETED_DOWNLOADS = "removeCompletedDownloads"
REMOVE_FAILED_DOWNLOADS = "removeFailedDownloads"
INFO_LINK = "infoLink"
TAGS = "tags"
FIELDS = "fields"
VALUE = "value"

# compared one to one between the config entry and the server record
SCALAR_PROPS = (
    CONFIG_CONTRACT,
    ENABLE,
    IMPLEMENTATION,
    IMPLEMENTATION_NAME,
    INFO_LINK,
    NAME,
    PRIORITY,
    PROTOCOL,
    REMOVE_COMPLETED_DOWNLOADS,
    REMOVE_FAILED_DOWNLOADS,
)

# servers mask these field values on read (e.g. "********")
SENSITIVE_FIELD_NAMES: FrozenSet[str] = frozenset(["apiKey", "password", "api_key"])


class DlcUnsupported(Exception):
    """unsupported action/value"""


class DlcNotFound(Exception):
    """does not exist"""


class DlcConfigError(Exception):
    """configuration cannot be used"""


@dataclass
class DlcCompareInfo:
    """how config entries and server records are matched and compared"""

    sensitive_fields: FrozenSet[str] = field(default_factory=lambda: SENSITIVE_FIELD_NAMES)
    id_sep: str = "::"


@dataclass
class RunOptions:
    """options on how to apply the differences"""

    dry_run: bool = False
    auto_update: bool = False
    auto_create: bool = False
    auto_delete: bool = False
