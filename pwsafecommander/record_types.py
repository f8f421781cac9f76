#                          __
#  _ ____ __ _____ __ _   / _|___
# | '_ \ V  V (_-</ _` | |  _/ -_)
# | .__/\_/\_//__/\__,_| |_| \___|
# |_|
#
# pwsafe Commander
#

import enum
import uuid
from typing import NamedTuple, Union

from .error import FieldDecodeError


class FieldKind(enum.IntEnum):
    """Record field type codes of the Password Safe v3 field dictionary"""
    UUID = 0x01
    GROUP = 0x02
    TITLE = 0x03
    USERNAME = 0x04
    NOTES = 0x05
    PASSWORD = 0x06
    URL = 0x0d
    EMAIL_ADDRESS = 0x14
    END_OF_RECORD = 0xff
    OTHER = -1


TEXT_KINDS = frozenset((FieldKind.GROUP, FieldKind.TITLE, FieldKind.USERNAME, FieldKind.NOTES,
                        FieldKind.PASSWORD, FieldKind.URL, FieldKind.EMAIL_ADDRESS))

UUID_LENGTH = 16


class Field(NamedTuple):
    type_code: int
    kind: FieldKind
    value: Union[None, str, bytes, uuid.UUID]


def classify(field_type):    # type: (int) -> FieldKind
    try:
        return FieldKind(field_type)
    except ValueError:
        return FieldKind.OTHER


def decode_field(field_type, data):    # type: (int, bytes) -> Field
    """Decodes one (type, bytes) pair. Raises FieldDecodeError when the bytes do not fit the kind."""
    kind = classify(field_type)
    if kind == FieldKind.END_OF_RECORD:
        value = None    # type: Union[None, str, bytes, uuid.UUID]
    elif kind == FieldKind.UUID:
        if len(data) != UUID_LENGTH:
            raise FieldDecodeError(field_type, f'invalid UUID length {len(data)}, expected {UUID_LENGTH}')
        value = uuid.UUID(bytes=bytes(data))
    elif kind in TEXT_KINDS:
        try:
            value = bytes(data).decode('utf-8')
        except UnicodeDecodeError as e:
            raise FieldDecodeError(field_type, f'invalid utf-8 text: {e.reason} at position {e.start}')
    else:
        value = bytes(data)
    return Field(field_type, kind, value)
