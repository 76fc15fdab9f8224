'''
Confirmation keys for the Steam mobile confirmation pages.

Every request to /mobileconf carries a key proving possession of the
identity_secret: base64(HMAC-SHA1(identity_secret, time || tag)).
'''

import base64
import hashlib
import hmac
import logging
from dataclasses import dataclass
from enum import Enum

from .device_id import generate_device_id
from .exceptions import EncodeError
from .guard_code import generate_auth_code, time_buffer
from .secret import normalize_secret
from .util import get_local_unix_time

logger = logging.getLogger(__name__)

MAX_TAG_LENGTH = 32


class ConfirmationTag(Enum):
    #What the key will be used for
    CONF = "conf"
    DETAILS = "details"
    ALLOW = "allow"
    CANCEL = "cancel"


def _tag_bytes(tag):
    if isinstance(tag, ConfirmationTag):
        tag = tag.value
    try:
        encoded_tag = tag.encode("utf-8")
    except (AttributeError, UnicodeEncodeError) as exc:
        raise EncodeError("Tag cannot be encoded: %r" % (tag,)) from exc
    #Longer tags are cut to the 32 bytes the message reserves for them
    return encoded_tag[:MAX_TAG_LENGTH]


def generate_confirmation_key(identity_secret, time, tag=ConfirmationTag.CONF):
    """
    Generate the base64 confirmation key for one action at one point in time.

    :param identity_secret: identity_secret as bytes, hex or base64
    :param time: unix time the key is for, generally the current time
    :param tag: a ConfirmationTag or any string. "conf" loads the confirmations
        page, "details" loads a trade, "allow" confirms and "cancel" denies it.
    """
    secret = normalize_secret(identity_secret)
    encoded_tag = _tag_bytes(tag)
    logger.debug("Generating confirmation key for time %d, tag length %d", time, len(encoded_tag))

    #Combine the time in bytes and the tag in bytes
    byte_array = time_buffer(time) + encoded_tag

    hashed_data = hmac.new(secret, msg=byte_array, digestmod=hashlib.sha1).digest()
    return base64.b64encode(hashed_data).decode("ascii")


@dataclass(frozen=True)
class GuardOptions:
    """Time, tag and clock offset for one code or key."""
    time: int
    tag: str = ConfirmationTag.CONF.value
    offset: int = 0

    @property
    def adjusted_time(self) -> int:
        return int(self.time) + int(self.offset)

    @classmethod
    def now(cls, tag=ConfirmationTag.CONF.value, offset=0) -> "GuardOptions":
        """Options for the current local time."""
        return cls(time=get_local_unix_time(), tag=tag, offset=offset)


class SteamGuardAccount():
    """ The secrets of one authenticator plus the SteamID they belong to. """
    def __init__(self, shared_secret, identity_secret, steam_id, device_id=None):
        self.shared_secret = normalize_secret(shared_secret)
        self.identity_secret = normalize_secret(identity_secret)
        self.steam_id = str(steam_id)
        self.device_id = device_id or generate_device_id(self.steam_id)

    def get_code(self, options):
        return generate_auth_code(self.shared_secret, options.time, options.offset)

    def generate_confirmation_key(self, options):
        return generate_confirmation_key(self.identity_secret, options.adjusted_time, options.tag)

    def generate_confirmation_query_params(self, options):
        """ Query parameters the mobileconf endpoints expect for the given tag. """
        tag = options.tag.value if isinstance(options.tag, ConfirmationTag) else options.tag
        return {"p": self.device_id,
                "a": self.steam_id,
                "k": self.generate_confirmation_key(options),
                "t": str(options.adjusted_time),
                "m": "android",
                "tag": tag}
