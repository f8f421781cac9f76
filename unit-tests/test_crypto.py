import hashlib
import hmac
from unittest import TestCase

from pwsafecommander import crypto


class TestCrypto(TestCase):
    def test_sha256(self):
        self.assertEqual(crypto.sha256(b'abc'), hashlib.sha256(b'abc').digest())

    def test_stretch_key(self):
        password = b'password'
        salt = bytes(range(32))
        expected = hashlib.sha256(password + salt).digest()
        for _ in range(5):
            expected = hashlib.sha256(expected).digest()
        self.assertEqual(crypto.stretch_key(password, salt, 5), expected)

        key = hashlib.sha256(password + salt).digest()
        self.assertEqual(crypto.stretch_key(password, salt, 0), key)

    def test_hmac_sha256(self):
        key = crypto.get_random_bytes(32)
        hf = crypto.hmac_sha256(key)
        hf.update(b'first')
        hf.update(b'second')
        self.assertEqual(hf.finalize(), hmac.new(key, b'firstsecond', hashlib.sha256).digest())

    def test_twofish_ecb(self):
        key = crypto.get_random_bytes(32)
        data = crypto.get_random_bytes(32)
        encrypted = crypto.encrypt_twofish_ecb(data, key)
        self.assertEqual(len(encrypted), 32)
        self.assertNotEqual(encrypted, data)
        self.assertEqual(encrypted[:16], crypto.encrypt_twofish_ecb(data[:16], key))
        self.assertEqual(crypto.decrypt_twofish_ecb(encrypted, key), data)

    def test_twofish_cbc(self):
        key = crypto.get_random_bytes(32)
        iv = crypto.get_random_bytes(16)
        data = bytes(16) * 4

        encrypted = crypto.encrypt_twofish_cbc(data, key, iv)
        self.assertEqual(len(encrypted), len(data))
        blocks = [encrypted[i:i + 16] for i in range(0, len(encrypted), 16)]
        self.assertEqual(len(set(blocks)), 4)

        self.assertEqual(crypto.decrypt_twofish_cbc(encrypted, key, iv), data)

        decrypter = crypto.TwofishCbcDecrypter(key, iv)
        self.assertEqual(b''.join(decrypter.decrypt_block(x) for x in blocks), data)

        with self.assertRaises(ValueError):
            crypto.encrypt_twofish_cbc(b'short', key, iv)

    def test_twofish_known_answer(self):
        key = bytes(32)
        plain = bytes(16)
        expected = bytes.fromhex('57FF739D4DC92C1BD7FC01700CC8216F')
        self.assertEqual(crypto.encrypt_twofish_ecb(plain, key), expected)
        self.assertEqual(crypto.decrypt_twofish_ecb(expected, key), plain)

        # CBC with a zero IV matches ECB on the first block
        self.assertEqual(crypto.encrypt_twofish_cbc(plain, key, bytes(16)), expected)
        self.assertEqual(crypto.TwofishCbcDecrypter(key, bytes(16)).decrypt_block(expected), plain)
