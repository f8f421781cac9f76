#                          __
#  _ ____ __ _____ __ _   / _|___
# | '_ \ V  V (_-</ _` | |  _/ -_)
# | .__/\_/\_//__/\__,_| |_| \___|
# |_|
#
# pwsafe Commander
#

import secrets

from cryptography.hazmat.backends import default_backend
from cryptography.hazmat.primitives.hashes import Hash, SHA256
from cryptography.hazmat.primitives.hmac import HMAC
from twofish import Twofish

_CRYPTO_BACKEND = default_backend()

BLOCK_SIZE = 16


def get_random_bytes(length):
    return secrets.token_bytes(length)


def sha256(data):    # type: (bytes) -> bytes
    hf = Hash(SHA256(), backend=_CRYPTO_BACKEND)
    hf.update(data)
    return hf.finalize()


def stretch_key(password, salt, iterations):    # type: (bytes, bytes, int) -> bytes
    key = sha256(password + salt)
    for _ in range(iterations):
        key = sha256(key)
    return key


def hmac_sha256(key):    # type: (bytes) -> HMAC
    return HMAC(key, SHA256(), backend=_CRYPTO_BACKEND)


def _xor_block(a, b):
    return bytes(x ^ y for x, y in zip(a, b))


def decrypt_twofish_ecb(data, key):    # type: (bytes, bytes) -> bytes
    cipher = Twofish(key)
    return b''.join(cipher.decrypt(data[i:i + BLOCK_SIZE]) for i in range(0, len(data), BLOCK_SIZE))


def encrypt_twofish_ecb(data, key):    # type: (bytes, bytes) -> bytes
    cipher = Twofish(key)
    return b''.join(cipher.encrypt(data[i:i + BLOCK_SIZE]) for i in range(0, len(data), BLOCK_SIZE))


class TwofishCbcDecrypter:
    """Block by block Twofish-CBC decryption.

    Password Safe interleaves the ciphertext with a plain end-of-file marker, so the
    stream is decrypted one block at a time instead of in a single call.
    """

    def __init__(self, key, iv):    # type: (bytes, bytes) -> None
        self.cipher = Twofish(key)
        self.previous = iv

    def decrypt_block(self, block):    # type: (bytes) -> bytes
        plain = _xor_block(self.cipher.decrypt(block), self.previous)
        self.previous = block
        return plain


def encrypt_twofish_cbc(data, key, iv):    # type: (bytes, bytes, bytes) -> bytes
    if len(data) % BLOCK_SIZE != 0:
        raise ValueError('Data length must be a multiple of the block size')
    cipher = Twofish(key)
    previous = iv
    encrypted = bytearray()
    for i in range(0, len(data), BLOCK_SIZE):
        previous = cipher.encrypt(_xor_block(data[i:i + BLOCK_SIZE], previous))
        encrypted.extend(previous)
    return bytes(encrypted)


def decrypt_twofish_cbc(data, key, iv):    # type: (bytes, bytes, bytes) -> bytes
    decrypter = TwofishCbcDecrypter(key, iv)
    return b''.join(decrypter.decrypt_block(data[i:i + BLOCK_SIZE]) for i in range(0, len(data), BLOCK_SIZE))
