'''
Steam Guard login codes.

The code is a TOTP variant: HMAC-SHA1 over the 30 second time step, dynamic
truncation of the digest, then five base 26 digits over Steam's own alphabet.
'''

import hashlib
import hmac
import logging

from .exceptions import EncodeError
from .secret import normalize_secret
from .util import TimeAlign

logger = logging.getLogger(__name__)

TIME_STEP = 30
CODE_LENGTH = 5
STEAM_GUARD_CHARS = "23456789BCDFGHJKMNPQRTVWXY"

UINT32_MAX = 0xFFFFFFFF


def time_buffer(value):
    """ Pack a value into 8 big-endian bytes, the high 4 always zero. """
    value = int(value)
    if value < 0 or value > UINT32_MAX:
        raise EncodeError("%d does not fit in an unsigned 32 bit integer" % value)
    return bytes(4) + value.to_bytes(4, byteorder='big', signed=False)


def generate_auth_code(shared_secret, time, time_offset=0):
    """
    Generate the 5 character Steam Guard code.

    :param shared_secret: shared_secret as bytes, hex or base64
    :param time: current unix time in seconds
    :param time_offset: seconds to add to time, e.g. the offset to Steam's clock
    """
    secret = normalize_secret(shared_secret)

    #Time step, integer division floors negative values too
    time_step = (int(time) + int(time_offset)) // TIME_STEP
    logger.debug("Generating auth code for time step %d", time_step)

    #Generate hash using the shared secret as key and time as the message
    hashed_data = hmac.new(secret, msg=time_buffer(time_step), digestmod=hashlib.sha1).digest()

    #The low nibble of the last byte picks a 4 byte window
    b = hashed_data[19] & 0xF
    code_point = int.from_bytes(hashed_data[b:b + 4], byteorder='big') & 0x7FFFFFFF

    code = []
    for _ in range(CODE_LENGTH):
        code_point, index = divmod(code_point, len(STEAM_GUARD_CHARS))
        code.append(STEAM_GUARD_CHARS[index])

    return ''.join(code)


def get_code(shared_secret):
    """ Code for right now, using the time aligned to Steam's servers. """
    return generate_auth_code(shared_secret, TimeAlign.get_time())
