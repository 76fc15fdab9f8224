"""
Errors raised while deriving Steam Guard codes.
"""


class SteamTotpError(Exception):
    """ Base class for everything this package raises. """
    pass


class DecodeError(SteamTotpError, ValueError):
    """ A secret could not be decoded from its hex or base64 text form. """
    pass


class EncodeError(SteamTotpError, ValueError):
    """ An input could not be packed into the HMAC message buffer. """
    pass


class MalformedResponseError(SteamTotpError):
    """ The time query endpoint answered without a usable server_time. """
    pass
