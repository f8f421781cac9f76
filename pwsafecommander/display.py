#                          __
#  _ ____ __ _____ __ _   / _|___
# | '_ \ V  V (_-</ _` | |  _/ -_)
# | .__/\_/\_//__/\__,_| |_| \___|
# |_|
#
# pwsafe Commander
#
import dataclasses
import json
from typing import List, Optional, Union

from colorama import init, Fore, Style

from .record import Record

init()


class bcolors:
    ENDC = '\033[0m'
    BOLD = '\033[1m'
    UNDERLINE = '\033[4m'


@dataclasses.dataclass(frozen=True)
class SecureEntry:
    """Identity and location of a record. Never carries secrets."""
    uuid: str
    group: Optional[str]
    title: Optional[str]
    username: Optional[str]
    url: Optional[str]
    email_address: Optional[str]


@dataclasses.dataclass(frozen=True)
class Entry:
    uuid: str
    group: Optional[str]
    title: Optional[str]
    password: Optional[str]
    username: Optional[str]
    url: Optional[str]
    email_address: Optional[str]
    notes: Optional[str]
    errors: List[str]


Projection = Union[SecureEntry, Entry]


def to_secure(record):    # type: (Record) -> SecureEntry
    return SecureEntry(uuid=record.uid, group=record.group, title=record.title, username=record.username,
                       url=record.url, email_address=record.email_address)


def to_full(record):    # type: (Record) -> Entry
    return Entry(uuid=record.uid, group=record.group, title=record.title, password=record.password,
                 username=record.username, url=record.url, email_address=record.email_address,
                 notes=record.notes, errors=list(record.errors))


def project(record, reveal=False):    # type: (Record, bool) -> Projection
    return to_full(record) if reveal else to_secure(record)


def projection_to_dict(entry):    # type: (Projection) -> dict
    return dataclasses.asdict(entry)


def to_json(record, reveal=False):    # type: (Record, bool) -> str
    return json.dumps(projection_to_dict(project(record, reveal)), ensure_ascii=False)


def formatted_candidates(records):    # type: (List[Record]) -> str
    lines = [f'{Fore.YELLOW}Multiple matches, please be more specific: {Style.RESET_ALL}']
    lines.extend(to_json(x, reveal=False) for x in records)
    return '\n'.join(lines)
