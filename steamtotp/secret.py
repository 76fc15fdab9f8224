"""
Turns a shared or identity secret into the raw key bytes used for the HMAC.

Secrets come out of .maFile exports as base64, some tools hand them around as
hex, and callers that already decoded them pass bytes. The input is classified
once into one of the variants below and then decoded.
"""
import base64
import binascii
import logging
import re

from .exceptions import DecodeError

logger = logging.getLogger(__name__)

#Anything containing 40 hex digits in a row is treated as hex, even inside a longer string
HEX_PATTERN = re.compile("[0-9a-f]{40}", re.IGNORECASE)


class RawSecret():
    """ Key bytes supplied directly. """
    def __init__(self, value):
        self.value = bytes(value)

    def decode(self):
        return self.value


class HexSecret():
    """ Key given as a hexadecimal string. """
    def __init__(self, value):
        self.value = value

    def decode(self):
        try:
            return binascii.unhexlify(self.value)
        except (binascii.Error, ValueError) as exc:
            raise DecodeError("Invalid hex secret: %s" % exc) from exc


class Base64Secret():
    """ Key given as a base64 string. """
    def __init__(self, value):
        self.value = value

    def decode(self):
        try:
            return base64.b64decode(self.value, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise DecodeError("Invalid base64 secret: %s" % exc) from exc


def classify_secret(secret):
    """ Pick the variant for a secret. Already classified secrets pass through. """
    if isinstance(secret, (RawSecret, HexSecret, Base64Secret)):
        return secret
    if isinstance(secret, (bytes, bytearray, memoryview)):
        return RawSecret(secret)
    if isinstance(secret, str):
        if HEX_PATTERN.search(secret):
            return HexSecret(secret)
        return Base64Secret(secret)
    raise DecodeError("Secret must be bytes or str, not %s" % type(secret).__name__)


def normalize_secret(secret):
    """
    Return the key bytes for a secret given as bytes, hex text or base64 text.

    Raises DecodeError when the text does not decode, or decodes to nothing.
    """
    variant = classify_secret(secret)
    logger.debug("Decoding secret as %s", type(variant).__name__)
    key = variant.decode()
    if not key:
        raise DecodeError("Secret is empty")
    return key
