"""
Clock helpers and Steam API endpoints. Nothing in here is needed to compute a
code from a known time; it only answers "what time is it on Steam's servers".
"""
import logging
import time

import requests

from .exceptions import MalformedResponseError

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = 10


class APIEndpoints():
    #A series of URL constants
    steam_api_base = "https://api.steampowered.com"
    two_factor_base = steam_api_base + "/ITwoFactorService/%s/v1/"
    two_factor_time_query = two_factor_base % "QueryTime"


def get_local_unix_time(offset=0):
    """ Current local unix time in whole seconds, plus offset seconds. """
    return int(time.time()) + int(offset)


def get_time_offset(session=None):
    """
    Ask Steam for its clock and return how many seconds it is ahead of ours.

    :param session: optional requests.Session to send the query with
    :raises MalformedResponseError: the reply has no server_time
    """
    poster = session if session is not None else requests
    response = poster.post(APIEndpoints.two_factor_time_query,
                           headers={"Content-Length": "0"},
                           timeout=REQUEST_TIMEOUT)
    try:
        query = response.json()
    except ValueError as exc:
        raise MalformedResponseError("Time query did not return JSON: %r" % response.text[:200]) from exc

    server_time = None
    if isinstance(query, dict) and isinstance(query.get("response"), dict):
        server_time = query["response"].get("server_time")
    if not server_time:
        raise MalformedResponseError("Malformed response: %r" % query)

    try:
        server_time = int(server_time)
    except (TypeError, ValueError) as exc:
        raise MalformedResponseError("server_time is not an integer: %r" % server_time) from exc

    offset = server_time - get_local_unix_time()
    logger.debug("Steam clock offset is %d seconds", offset)
    return offset


class TimeAlign():
    """ Align local time to Steam's server times and store it statically. """
    difference = 0
    aligned = False

    @classmethod
    def get_time(cls):
        """ Current unix time accounting for the local time difference to Steam's servers. """
        if not cls.aligned:
            cls.align()
        return get_local_unix_time(cls.difference)

    @classmethod
    def align(cls, session=None):
        """ Gets the time difference between local and Steam. """
        try:
            cls.difference = get_time_offset(session)
        except (requests.RequestException, MalformedResponseError):
            logger.warning("Time alignment with Steam failed")
            raise
        cls.aligned = True
        return cls.difference

    @classmethod
    def reset(cls):
        cls.difference = 0
        cls.aligned = False
