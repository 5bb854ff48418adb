# Copyright 2022 Francis Meyvis (pwsync@mikmak.fun)

"""interactive synchronize using the console"""

import sys
from html import escape
from json import dumps
from typing import Any, Mapping, Optional

from prompt_toolkit import HTML
from prompt_toolkit import print_formatted_text as print_ft
from prompt_toolkit import prompt
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.styles import Style
from prompt_toolkit.validation import ValidationError, Validator

from .api_client import DownloadClientApi
from .common import (
    FIELDS,
    ID,
    IMPLEMENTATION,
    NAME,
    SCALAR_PROPS,
    TAGS,
    VALUE,
    DlcCompareInfo,
    DlcUnsupported,
    RunOptions,
)
from .sync import ChangedClient, DownloadClientsDiff

STYLE = Style.from_dict(
    {
        "data": "bold",
        "info": "italic",
    }
)

MASK = "*******"


def _markup(data: str, markup: str):
    return f"<{markup}>{escape(data)}</{markup}>"


def _format_value(value: Any) -> str:
    return dumps(value, default=str)


def _masked_fields(record: Mapping, compare_info: DlcCompareInfo) -> dict:
    fields = record.get(FIELDS)
    if not isinstance(fields, list):
        return {}
    return {
        f.get(NAME): MASK if f.get(NAME) in compare_info.sensitive_fields else f.get(VALUE)
        for f in fields
        if isinstance(f, Mapping)
    }


def _print_ft_header(count: int, record: Mapping):
    name = record.get(NAME)
    header = f"    <info>{count}. </info>"
    header += "<info>not available</info>" if name is None else _markup(str(name), "data")
    header += "<info> (</info>" + _markup(str(record.get(IMPLEMENTATION, "")), "info") + "<info>)</info>"
    print_ft(HTML(header), style=STYLE)


def _print_ft_record(record: Mapping, compare_info: DlcCompareInfo, verb: str):
    for prop in SCALAR_PROPS + (TAGS,):
        if prop in record:
            value = _markup(_format_value(record[prop]), "data")
            print_ft(HTML(f"      <info>{verb} {prop:<24}: </info>{value}"), style=STYLE)
    for name, value in _masked_fields(record, compare_info).items():
        value = _markup(_format_value(value), "data")
        print_ft(HTML(f"      <info>{verb} field {str(name):<18}: </info>{value}"), style=STYLE)


def _print_ft_change(change: ChangedClient, server: Optional[Mapping], compare_info: DlcCompareInfo):
    server = server or {}
    for prop in SCALAR_PROPS + (TAGS,):
        if prop in change.payload and server.get(prop) != change.payload[prop]:
            old_value = _markup(_format_value(server.get(prop)), "data")
            new_value = _markup(_format_value(change.payload[prop]), "data")
            print_ft(
                HTML(f"      <info>update {prop:<22}: </info>{old_value}<info> -> </info>{new_value}"),
                style=STYLE,
            )
    old_fields = _masked_fields(server, compare_info)
    for name, value in _masked_fields(change.payload, compare_info).items():
        if old_fields.get(name) != value:
            old_value = _markup(_format_value(old_fields.get(name)), "data")
            new_value = _markup(_format_value(value), "data")
            print_ft(
                HTML(f"      <info>update field {str(name):<16}: </info>{old_value}<info> -> </info>{new_value}"),
                style=STYLE,
            )


def _sync_prompt(kind: str):
    def toolbar():
        return HTML(f"<b>A</b>pply {kind} | <b>S</b>kip {kind} | <b>Q</b>uit synchronization")

    class AnswerValidator(Validator):
        """validates user's input"""

        def validate(self, document):
            text = document.text
            if len(text) < 1 or text[0].lower() not in ["a", "s", "q"]:
                raise ValidationError(message="Unsupported content", cursor_position=0)

    return prompt(
        None, bottom_toolbar=toolbar, validator=AnswerValidator(), completer=WordCompleter(["apply", "skip", "quit"])
    )


def _sync_element(kind: str, element, client: DownloadClientApi):
    if kind == "update":
        record = client.update(element.id, element.payload)
        print(f"updated: {record.get(NAME) if record else element.id}")
    elif kind == "create":
        record = client.create(element)
        print(f"created: {record.get(NAME) if record else element.get(NAME)}")
    elif kind == "delete":
        client.delete(str(element.get(ID)))
        print(f"deleted: {element.get(NAME)}")
    else:
        raise DlcUnsupported(f"_sync_element({kind})")


def _is_automatic(kind: str, run_options: RunOptions) -> bool:
    return (
        (run_options.auto_update and kind == "update")
        or (run_options.auto_create and kind == "create")
        or (run_options.auto_delete and kind == "delete")
    )


def _sync_section(
    kind: str,
    diff: DownloadClientsDiff,
    servers: Mapping[str, Mapping],
    compare_info: DlcCompareInfo,
    run_options: RunOptions,
    client: DownloadClientApi,
):
    if kind == "update":
        data = diff.changed
    elif kind == "create":
        data = diff.missing_on_server
    elif kind == "delete":
        data = diff.not_available_anymore
    else:
        raise DlcUnsupported(f"_sync_section({kind})")

    print_ft(HTML(_markup(f"To {kind}: {len(data)}", "info")), style=STYLE)

    for count, element in enumerate(data, 1):
        if kind == "update":
            _print_ft_header(count, element.payload)
            _print_ft_change(element, servers.get(element.id), compare_info)
        else:
            _print_ft_header(count, element)
            _print_ft_record(element, compare_info, "add" if kind == "create" else "remove")

        if run_options.dry_run:
            continue

        if _is_automatic(kind, run_options):
            _sync_element(kind, element, client)
            continue

        answer = _sync_prompt(kind)[0].lower()
        if answer == "q":
            sys.exit(0)
        if answer == "s":
            continue
        if answer == "a":
            _sync_element(kind, element, client)


def console_sync(
    diff: Optional[DownloadClientsDiff],
    server_list,
    compare_info: DlcCompareInfo,
    run_options: RunOptions,
    client: DownloadClientApi,
):
    """shows the differences and applies them with an interactive console"""

    if diff is None:
        print_ft(HTML(_markup("Download clients are in sync.", "info")), style=STYLE)
        return

    servers = {str(s.get(ID)): s for s in server_list}
    _sync_section("update", diff, servers, compare_info, run_options, client)
    _sync_section("create", diff, servers, compare_info, run_options, client)
    _sync_section("delete", diff, servers, compare_info, run_options, client)
