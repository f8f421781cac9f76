#                          __
#  _ ____ __ _____ __ _   / _|___
# | '_ \ V  V (_-</ _` | |  _/ -_)
# | .__/\_/\_//__/\__,_| |_| \___|
# |_|
#
# pwsafe Commander
#

from typing import Iterable, List, NamedTuple, Optional, Sequence, Union

from .record import Record


def matches_exactly(record, term):    # type: (Record, str) -> bool
    uid = record.uid
    return record.display_name == term or (uid != '' and uid == term)


def matches_loosely(record, term):    # type: (Record, str) -> bool
    return term in record.display_name or term in record.uid


class Exact(NamedTuple):
    record: Record


class Ambiguous(NamedTuple):
    matches: Sequence[Record]


class NotFound(NamedTuple):
    term: str


Resolution = Union[Exact, Ambiguous, NotFound]


def resolve(records, term):    # type: (Iterable[Record], str) -> Resolution
    """Finds the one record a search term refers to.

    A record whose "group.title" or UUID equals the term wins outright. Otherwise the
    records containing the term are collected in order: none is NotFound, one is Exact,
    several are Ambiguous.
    """
    records = list(records)
    exact = next((x for x in records if matches_exactly(x, term)), None)
    if exact is not None:
        return Exact(exact)

    matches = [x for x in records if matches_loosely(x, term)]
    if len(matches) == 0:
        return NotFound(term)
    if len(matches) == 1:
        return Exact(matches[0])
    return Ambiguous(matches)


def list_records(records, term=None):    # type: (Iterable[Record], Optional[str]) -> List[Record]
    if term is None:
        return list(records)
    return [x for x in records if matches_loosely(x, term)]
