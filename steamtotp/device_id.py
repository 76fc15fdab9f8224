"""
Device identifiers in the format the Steam mobile app registers with.
"""
import hashlib
import re

from .exceptions import EncodeError

DEVICE_ID_PREFIX = "android:"

DEVICE_ID_PATTERN = re.compile(
    "^android:[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$")


def generate_device_id(steam_id, salt=""):
    """
    Derive a stable, UUID shaped device id from a SteamID.

    :param steam_id: the 64 bit SteamID, or any object whose str() is one
    :param salt: optional text appended to the SteamID before hashing
    """
    data = str(steam_id) + (salt or "")
    try:
        data = data.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise EncodeError("SteamID or salt is not valid text: %s" % exc) from exc
    digest = hashlib.sha1(data).hexdigest()
    #Only the first 32 of the 40 hex characters are used
    return DEVICE_ID_PREFIX + "-".join(
        (digest[0:8], digest[8:12], digest[12:16], digest[16:20], digest[20:32]))
