import io
import uuid
from typing import List, Optional, Sequence, Tuple

from pwsafecommander import crypto, pwsafe3
from pwsafecommander.params import PwsafeParams
from pwsafecommander.record import assemble_all
from pwsafecommander.record_types import FieldKind

USER_PASSWORD = 'correct horse battery staple'
_ITERATIONS = 2048

UUID_AMAZON = uuid.UUID('6f1c2a84-3d2b-4c1e-9b8a-0a1b2c3d4e5f')
UUID_AMAZON_BACKUP = uuid.UUID('1e2d3c4b-5a69-4788-9a0b-1c2d3e4f5a6b')
UUID_GMAIL = uuid.UUID('a0b1c2d3-e4f5-4607-8899-aabbccddeeff')

FieldList = List[Tuple[int, bytes]]

END = (FieldKind.END_OF_RECORD, b'')


def record_fields():    # type: () -> List[FieldList]
    return [
        [(FieldKind.UUID, UUID_AMAZON.bytes), (FieldKind.GROUP, b'web'), (FieldKind.TITLE, b'amazon'),
         (FieldKind.USERNAME, b'alice'), (FieldKind.PASSWORD, b'p@ss'), (FieldKind.URL, b'https://amazon.com'),
         (FieldKind.NOTES, b'security question: blue')],
        [(FieldKind.UUID, UUID_AMAZON_BACKUP.bytes), (FieldKind.GROUP, b'web'), (FieldKind.TITLE, b'amazon-backup'),
         (FieldKind.USERNAME, b'alice.backup'), (FieldKind.PASSWORD, b'backup-pass')],
        [(FieldKind.UUID, UUID_GMAIL.bytes), (FieldKind.GROUP, b'email'), (FieldKind.TITLE, b'gmail'),
         (FieldKind.USERNAME, b'bob'), (FieldKind.EMAIL_ADDRESS, b'bob@gmail.com'), (FieldKind.PASSWORD, b'gm41l'),
         (0x07, b'\x00\x00\x00\x00')],
    ]


def field_stream(records=None):    # type: (Optional[Sequence[FieldList]]) -> FieldList
    stream = []    # type: FieldList
    for fields in (records if records is not None else record_fields()):
        stream.extend(fields)
        stream.append(END)
    return stream


def header_fields():    # type: () -> FieldList
    return [
        (0x00, b'\x0d\x03'),
        (0x01, uuid.UUID('0c8f3a52-6d3e-4b7a-a1c4-2f9e8d7c6b5a').bytes),
        (0x09, b'unit test'),
    ]


def _encode_field(field_type, data):    # type: (int, bytes) -> bytes
    prefix = len(data).to_bytes(4, byteorder='little') + bytes([field_type])
    plain = prefix + data
    padding = (-len(plain)) % crypto.BLOCK_SIZE
    return plain + crypto.get_random_bytes(padding)


def encrypt_psafe3(plain, field_data, password=USER_PASSWORD, iterations=_ITERATIONS, tamper=False):
    # type: (bytes, Sequence[bytes], str, int, bool) -> bytes
    salt = crypto.get_random_bytes(pwsafe3.SALT_LENGTH)
    stretched_key = crypto.stretch_key(password.encode('utf-8'), salt, iterations)
    record_key = crypto.get_random_bytes(32)
    hmac_key = crypto.get_random_bytes(32)
    iv = crypto.get_random_bytes(crypto.BLOCK_SIZE)

    hf = crypto.hmac_sha256(hmac_key)
    for data in field_data:
        hf.update(data)
    digest = hf.finalize()
    if tamper:
        digest = bytes([digest[0] ^ 0xff]) + digest[1:]

    return pwsafe3.TAG + salt + iterations.to_bytes(4, byteorder='little') + crypto.sha256(stretched_key) + \
        crypto.encrypt_twofish_ecb(record_key, stretched_key) + crypto.encrypt_twofish_ecb(hmac_key, stretched_key) + \
        iv + crypto.encrypt_twofish_cbc(plain, record_key, iv) + pwsafe3.EOF_MARKER + digest


def build_psafe3(records=None, password=USER_PASSWORD, iterations=_ITERATIONS, header=None,
                 tamper=False, truncate=0):
    # type: (Optional[Sequence[FieldList]], str, int, Optional[FieldList], bool, int) -> bytes
    fields = list(header if header is not None else header_fields())
    fields.append((pwsafe3.END_OF_ENTRY, b''))
    fields.extend(field_stream(records))

    plain = b''.join(_encode_field(t, d) for t, d in fields)
    content = encrypt_psafe3(plain, [d for _, d in fields], password=password, iterations=iterations, tamper=tamper)
    if truncate:
        content = content[:-truncate]
    return content


def open_reader(content, password=USER_PASSWORD):    # type: (bytes, str) -> pwsafe3.PwsafeReader
    return pwsafe3.PwsafeReader(io.BytesIO(content), password)


def get_params(dbfile='vault.psafe3'):    # type: (str) -> PwsafeParams
    params = PwsafeParams(dbfile=dbfile)
    params.password = USER_PASSWORD
    return params


def get_loaded_params():    # type: () -> PwsafeParams
    params = get_params()
    params.records = list(assemble_all(field_stream()))
    return params
