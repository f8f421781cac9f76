#                          __
#  _ ____ __ _____ __ _   / _|___
# | '_ \ V  V (_-</ _` | |  _/ -_)
# | .__/\_/\_//__/\__,_| |_| \___|
# |_|
#
# pwsafe Commander
#

import hmac
import logging
from typing import BinaryIO, Dict, Iterator, Optional, Tuple, Union

from . import crypto
from .error import ContainerError, IntegrityError, InvalidPasswordError

TAG = b'PWS3'
EOF_MARKER = b'PWS3-EOFPWS3-EOF'
SALT_LENGTH = 32
HMAC_LENGTH = 32
PREAMBLE_LENGTH = 4 + SALT_LENGTH + 4 + 32 + 32 + 32 + crypto.BLOCK_SIZE
MIN_ITERATIONS = 2048

HEADER_VERSION = 0x00
END_OF_ENTRY = 0xff

# length (4) + type (1) in the first block of a field
FIELD_PREFIX_LENGTH = 5


class PwsafeReader:
    """Reads the decrypted fields of a Password Safe v3 file.

    The header is consumed when the reader is created; iterating the reader yields the
    (field_type, data) pairs of the records. verify() checks the HMAC once every field
    has been read.
    """

    def __init__(self, stream, password):    # type: (BinaryIO, Union[str, bytes]) -> None
        self._stream = stream    # type: Optional[BinaryIO]
        self._eof = False
        self._stored_hmac = b''
        self._verified = None    # type: Optional[bool]
        self.header = {}    # type: Dict[int, bytes]
        self.iterations = 0

        if isinstance(password, str):
            password = password.encode('utf-8')

        preamble = stream.read(PREAMBLE_LENGTH)
        if len(preamble) < PREAMBLE_LENGTH or preamble[:4] != TAG:
            raise ContainerError('Not a Password Safe v3 file')

        pos = 4
        salt = preamble[pos:pos + SALT_LENGTH]
        pos += SALT_LENGTH
        self.iterations = int.from_bytes(preamble[pos:pos + 4], byteorder='little')
        pos += 4
        password_hash = preamble[pos:pos + 32]
        pos += 32
        b1b2 = preamble[pos:pos + 32]
        pos += 32
        b3b4 = preamble[pos:pos + 32]
        pos += 32
        iv = preamble[pos:pos + crypto.BLOCK_SIZE]

        logging.debug('Key stretch iterations: %d', self.iterations)
        if self.iterations < MIN_ITERATIONS:
            logging.warning('Key stretch iterations %d is below the minimum of %d', self.iterations, MIN_ITERATIONS)

        stretched_key = crypto.stretch_key(password, salt, self.iterations)
        if not hmac.compare_digest(crypto.sha256(stretched_key), password_hash):
            raise InvalidPasswordError()

        record_key = crypto.decrypt_twofish_ecb(b1b2, stretched_key)
        hmac_key = crypto.decrypt_twofish_ecb(b3b4, stretched_key)
        self._decrypter = crypto.TwofishCbcDecrypter(record_key, iv)
        self._hmac = crypto.hmac_sha256(hmac_key)

        self._read_header()

    @classmethod
    def open(cls, filename, password):    # type: (str, Union[str, bytes]) -> 'PwsafeReader'
        stream = open(filename, 'rb')
        try:
            return cls(stream, password)
        except Exception:
            stream.close()
            raise

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self):
        self._decrypter = None
        self._hmac = None
        if self._stream:
            self._stream.close()
            self._stream = None

    @property
    def version(self):    # type: () -> Optional[int]
        data = self.header.get(HEADER_VERSION)
        if data and len(data) >= 2:
            return int.from_bytes(data[:2], byteorder='little')

    def _read_header(self):
        while True:
            field = self._read_field()
            if field is None:
                raise ContainerError('Incomplete header')
            field_type, data = field
            if field_type == END_OF_ENTRY:
                break
            if field_type not in self.header:
                self.header[field_type] = data
        if self.version is not None:
            logging.debug('Database format version: %04x', self.version)

    def _read_block(self):    # type: () -> Optional[bytes]
        if self._stream is None:
            raise ContainerError('Password Safe file is closed')
        block = self._stream.read(crypto.BLOCK_SIZE)
        if block == EOF_MARKER:
            self._stored_hmac = self._stream.read(HMAC_LENGTH)
            if len(self._stored_hmac) != HMAC_LENGTH:
                raise ContainerError('Unexpected end of file: HMAC is missing')
            self._eof = True
            return None
        if len(block) != crypto.BLOCK_SIZE:
            raise ContainerError('Unexpected end of file')
        return self._decrypter.decrypt_block(block)

    def _read_field(self):    # type: () -> Optional[Tuple[int, bytes]]
        if self._eof:
            return None
        block = self._read_block()
        if block is None:
            return None

        length = int.from_bytes(block[:4], byteorder='little')
        field_type = block[4]
        data = bytearray(block[FIELD_PREFIX_LENGTH:FIELD_PREFIX_LENGTH + length])
        while len(data) < length:
            block = self._read_block()
            if block is None:
                raise ContainerError(f'Field {field_type} is truncated')
            data.extend(block[:length - len(data)])

        data = bytes(data)
        self._hmac.update(data)
        return field_type, data

    def read_field(self):    # type: () -> Optional[Tuple[int, bytes]]
        return self._read_field()

    def __iter__(self):    # type: () -> Iterator[Tuple[int, bytes]]
        while True:
            field = self._read_field()
            if field is None:
                return
            yield field

    def verify(self):    # type: () -> None
        if not self._eof:
            raise ContainerError('Cannot verify the file before all fields are read')
        if self._verified is None:
            if self._hmac is None:
                raise ContainerError('Password Safe file is closed')
            self._verified = hmac.compare_digest(self._hmac.finalize(), self._stored_hmac)
        if not self._verified:
            raise IntegrityError('HMAC check failed: the file is corrupted or has been tampered with')
