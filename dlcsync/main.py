#!/usr/bin/env python3

# Copyright 2022 Francis Meyvis (pwsync@mikmak.fun)

""" download client sync's entry point"""

from argparse import ArgumentDefaultsHelpFormatter, ArgumentParser
from getpass import getpass
from json import dumps
from logging import DEBUG, INFO, WARNING, FileHandler, basicConfig, getLogger
from os import getenv, path
from time import strftime

from .arr_api import DEFAULT_API_VERSION, ArrApiClient
from .common import LOGGER_NAME, DlcCompareInfo, RunOptions
from .config import load_config
from .console import console_sync
from .sync import DownloadClientSyncer
from .version import __version__


def _parse_command_line(argv=None):
    parser = ArgumentParser(
        description="Synchronise the download clients of a Sonarr/Radarr-like server 'to' a YAML config",
        formatter_class=ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument(
        "-c",
        "--config",
        help="the YAML file with the desired download clients (a 'download_clients' list). "
        + "Overrides the env. var. DLCSYNC_CONFIG",
    )

    parser.add_argument(
        "-u",
        "--url",
        help="the server's base URL, e.g. http://localhost:8989. Overrides the env. var. DLCSYNC_URL",
    )

    parser.add_argument(
        "--api-key",
        help="the server's API key. "
        + "Overrides the env. var. DLCSYNC_API_KEY. "
        + "Warning: this is unsafe as command-line options can leak out from the process scope, "
        + "or stored in the shell history buffer, etc. If left empty, it is prompted for on the command line",
    )

    parser.add_argument("--api-version", default=DEFAULT_API_VERSION, help="the server's API version")

    parser.add_argument(
        "--id-sep", default="::", help="a separator to separate the id key parts (name, implementation)"
    )

    parser.add_argument(
        "-s",
        "--sensitive-field",
        action="append",
        dest="sensitive_fields",
        help="name of a field the server masks, excluded from comparison (repeatable). "
        + "Replaces the config's 'sensitive_fields' and the defaults",
    )

    parser.add_argument(
        "-d",
        "--dry-run",
        action="store_true",
        help="describe the action then quit without modifications",
    )

    parser.add_argument("--json", action="store_true", help="print the differences as JSON then quit")

    parser.add_argument("-U", "--auto-update", action="store_true", help="automatically update all download clients")
    parser.add_argument("-C", "--auto-create", action="store_true", help="automatically create all download clients")
    parser.add_argument("-D", "--auto-delete", action="store_true", help="automatically delete all download clients")

    parser.add_argument("-v", "--version", action="version", version=f"%(prog)s {__version__}")

    parser.add_argument("-l", "--log-level", type=int, default=30, help="logging level")

    parser.add_argument("--log-dir", action="store", default=".", help="log directory")

    args = parser.parse_args(argv)

    # get values from env. vars. if necessary
    if args.config is None:
        args.config = getenv("DLCSYNC_CONFIG", None)
    if args.url is None:
        args.url = getenv("DLCSYNC_URL", None)
    if args.api_key is None:
        args.api_key = getenv("DLCSYNC_API_KEY", None)

    if args.config is None:
        parser.error("a config file is required (--config or DLCSYNC_CONFIG)")
    if args.url is None:
        parser.error("a server URL is required (--url or DLCSYNC_URL)")

    return args


def _diffsync_verbosity(log_level: int) -> int:
    # 0 for WARNING logs, 1 for INFO logs, 2 for DEBUG logs
    if log_level <= DEBUG:
        return 2
    if log_level <= INFO:
        return 1
    return 0


def main(argv=None):
    """entry point for download client synchronisation"""

    args = _parse_command_line(argv)

    basicConfig(format="%(asctime)s %(levelname)s:%(message)s", level=WARNING)
    logger = getLogger(LOGGER_NAME)
    logger.setLevel(args.log_level)

    file_handler = FileHandler(strftime(path.join(args.log_dir, "dlcsync_%Y_%m_%d_%H_%M_%S.log")))
    logger.addHandler(file_handler)
    logger.propagate = False  # do not further propagate to the root handler (stdout)

    config = load_config(args.config)

    sensitive_fields = frozenset(args.sensitive_fields) if args.sensitive_fields else config.sensitive_fields
    compare_info = DlcCompareInfo(sensitive_fields, args.id_sep)

    api_key = args.api_key
    if api_key is None:
        api_key = getpass(f"API key for {args.url}:")

    client = ArrApiClient(args.url, api_key, args.api_version)
    try:
        server_list = client.read()
        syncer = DownloadClientSyncer(compare_info, _diffsync_verbosity(args.log_level))
        diff = syncer.diff(config.download_clients, server_list)

        if args.json:
            print(dumps(None if diff is None else diff.to_dict(), indent=2, default=str))
            return

        run_options = RunOptions(args.dry_run, args.auto_update, args.auto_create, args.auto_delete)
        console_sync(diff, server_list, compare_info, run_options, client)
    finally:
        client.close()


if __name__ == "__main__":
    main()
