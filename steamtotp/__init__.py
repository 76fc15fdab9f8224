"""
Steam Guard mobile authenticator codes: login codes, confirmation keys and
device ids.
"""
from .device_id import generate_device_id
from .exceptions import DecodeError, EncodeError, MalformedResponseError, SteamTotpError
from .guard_code import STEAM_GUARD_CHARS, generate_auth_code, get_code
from .secret import Base64Secret, HexSecret, RawSecret, classify_secret, normalize_secret
from .trade_confirm import ConfirmationTag, GuardOptions, SteamGuardAccount, generate_confirmation_key
from .util import APIEndpoints, TimeAlign, get_local_unix_time, get_time_offset

__version__ = "1.0.0"
