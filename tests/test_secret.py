import base64
import unittest

from .context import steamtotp
from steamtotp import secret
from steamtotp.exceptions import DecodeError

KEY = bytes(range(20))


class SecretTest(unittest.TestCase):
    def test_bytes_pass_through(self):
        self.assertEqual(secret.normalize_secret(KEY), KEY)
        self.assertEqual(secret.normalize_secret(bytearray(KEY)), KEY)
        self.assertIsInstance(secret.classify_secret(KEY), secret.RawSecret)

    def test_hex_round_trip(self):
        self.assertEqual(secret.normalize_secret(KEY.hex()), KEY)
        self.assertEqual(secret.normalize_secret(KEY.hex().upper()), KEY)

    def test_base64_round_trip(self):
        encoded = base64.b64encode(KEY).decode("ascii")
        self.assertIsInstance(secret.classify_secret(encoded), secret.Base64Secret)
        self.assertEqual(secret.normalize_secret(encoded), KEY)

    def test_hex_wins_over_valid_base64(self):
        #Valid base64 as well, but 40 hex digits are present so it is read as hex
        text = "0123456789abcdef0123456789abcdef01234567"
        self.assertIsInstance(secret.classify_secret(text), secret.HexSecret)
        self.assertEqual(len(secret.normalize_secret(text)), 20)

        text = "0123456789abcdef0123456789abcdef0123456789ab"
        self.assertEqual(len(secret.normalize_secret(text)), 22)

    def test_hex_digits_embedded_in_other_text(self):
        text = "QUJD" + "ab" * 20 + "QUJD"
        self.assertIsInstance(secret.classify_secret(text), secret.HexSecret)
        with self.assertRaises(DecodeError):
            secret.normalize_secret(text)

    def test_short_hex_is_base64(self):
        self.assertIsInstance(secret.classify_secret("abcd" * 9), secret.Base64Secret)

    def test_invalid_base64(self):
        with self.assertRaises(DecodeError):
            secret.normalize_secret("not*base64")
        with self.assertRaises(DecodeError):
            secret.normalize_secret("abc")

    def test_odd_length_hex(self):
        with self.assertRaises(DecodeError):
            secret.normalize_secret("0" * 41)

    def test_empty_secret(self):
        with self.assertRaises(DecodeError):
            secret.normalize_secret("")
        with self.assertRaises(DecodeError):
            secret.normalize_secret(b"")

    def test_wrong_type(self):
        with self.assertRaises(DecodeError):
            secret.normalize_secret(12345)

    def test_decode_error_is_value_error(self):
        with self.assertRaises(ValueError):
            secret.normalize_secret("not*base64")


if __name__ == "__main__":
    unittest.main()
