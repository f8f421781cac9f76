#                          __
#  _ ____ __ _____ __ _   / _|___
# | '_ \ V  V (_-</ _` | |  _/ -_)
# | .__/\_/\_//__/\__,_| |_| \___|
# |_|
#
# pwsafe Commander
#

import enum
import logging
import uuid
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from .error import FieldDecodeError
from .record_types import Field, FieldKind, decode_field


class Record:
    """A password safe entry assembled from the fields between two end-of-record markers"""

    __slots__ = ('_fields', '_errors')

    def __init__(self, fields=None, errors=None):    # type: (Optional[Iterable[Field]], Optional[Iterable[str]]) -> None
        self._fields = tuple(fields or ())
        self._errors = tuple(errors or ())

    @property
    def fields(self):    # type: () -> Tuple[Field, ...]
        return self._fields

    @property
    def errors(self):    # type: () -> Tuple[str, ...]
        return self._errors

    def get_field_value(self, kind):    # type: (FieldKind) -> Union[None, str, uuid.UUID]
        field = next((x for x in self._fields if x.kind == kind), None)
        return field.value if field else None

    @property
    def unique_id(self):    # type: () -> Optional[uuid.UUID]
        return self.get_field_value(FieldKind.UUID)

    @property
    def uid(self):    # type: () -> str
        record_uuid = self.unique_id
        return str(record_uuid) if record_uuid else ''

    @property
    def group(self):    # type: () -> Optional[str]
        return self.get_field_value(FieldKind.GROUP)

    @property
    def title(self):    # type: () -> Optional[str]
        return self.get_field_value(FieldKind.TITLE)

    @property
    def username(self):    # type: () -> Optional[str]
        return self.get_field_value(FieldKind.USERNAME)

    @property
    def password(self):    # type: () -> Optional[str]
        return self.get_field_value(FieldKind.PASSWORD)

    @property
    def url(self):    # type: () -> Optional[str]
        return self.get_field_value(FieldKind.URL)

    @property
    def email_address(self):    # type: () -> Optional[str]
        return self.get_field_value(FieldKind.EMAIL_ADDRESS)

    @property
    def notes(self):    # type: () -> Optional[str]
        return self.get_field_value(FieldKind.NOTES)

    @property
    def display_name(self):    # type: () -> str
        return f'{self.group or ""}.{self.title or ""}'

    def __repr__(self):
        return f'Record({self.display_name!r}, uid={self.uid!r})'


class AssemblerState(enum.Enum):
    Idle = 0
    Accumulating = 1


class RecordAssembler:
    """Groups a stream of (field_type, data) pairs into records.

    Fields that fail to decode are reported in the record's errors and do not stop the record.
    Fields left over when the stream ends without an end-of-record marker are discarded.
    """

    def __init__(self):
        self.state = AssemblerState.Idle
        self._fields = []    # type: List[Field]
        self._errors = []    # type: List[str]
        self._source = None
        self._iterator = None    # type: Optional[Iterator[Tuple[int, bytes]]]

    def _reset(self):
        self.state = AssemblerState.Idle
        self._fields = []
        self._errors = []

    def _fields_of(self, field_source):    # type: (Iterable[Tuple[int, bytes]]) -> Iterator[Tuple[int, bytes]]
        # a re-iterable source keeps its position across calls
        if field_source is not self._source:
            self._source = field_source
            self._iterator = iter(field_source)
        return self._iterator

    def assemble_next(self, field_source):    # type: (Iterable[Tuple[int, bytes]]) -> Optional[Record]
        for field_type, data in self._fields_of(field_source):
            try:
                field = decode_field(field_type, data)
            except FieldDecodeError as e:
                logging.debug('Field decode error: type %d: %s', field_type, e.message)
                self._errors.append(f'Error reading field({field_type}): {e.message}')
                self.state = AssemblerState.Accumulating
                continue

            if field.kind == FieldKind.END_OF_RECORD:
                record = Record(self._fields, self._errors)
                self._reset()
                return record

            self._fields.append(field)
            self.state = AssemblerState.Accumulating

        if self.state == AssemblerState.Accumulating:
            logging.warning('Incomplete record')
        self._reset()
        return None

    def assemble_all(self, field_source):    # type: (Iterable[Tuple[int, bytes]]) -> List[Record]
        source = iter(field_source)
        records = []    # type: List[Record]
        while True:
            record = self.assemble_next(source)
            if record is None:
                break
            records.append(record)
        logging.debug('Assembled %d record(s)', len(records))
        return records


def assemble_next(field_source):    # type: (Iterator[Tuple[int, bytes]]) -> Optional[Record]
    """Reads one record. Pass an iterator to read the following records with further calls."""
    return RecordAssembler().assemble_next(field_source)


def assemble_all(field_source):    # type: (Iterable[Tuple[int, bytes]]) -> Sequence[Record]
    return RecordAssembler().assemble_all(field_source)
