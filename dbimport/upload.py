"""Import a local backup file into the database server.

The file is streamed as the body of a single POST request to the
'/import' endpoint, with the credentials in the user-info part of the URL.
"""

import collections
import http.client
import logging
import urllib.parse

import requests

from dbimport import constants

logger = logging.getLogger(__name__)

MESSAGES = {
    constants.ARGUMENT_ERROR: constants.ARGUMENT_MESSAGE,
    constants.FILE_ERROR: constants.FILE_MESSAGE,
    constants.CONNECTION_ERROR: constants.CONNECTION_MESSAGE,
    constants.AUTH_OR_SERVER_ERROR: constants.CONNECTION_MESSAGE,
}


class Outcome(collections.namedtuple("Outcome", ["status", "message"])):
    "The result of one import; 'status' is one of the constants.OUTCOMES."

    __slots__ = ()

    @property
    def ok(self):
        return self.status == constants.SUCCESS


class ImportFailure(Exception):
    "Raised by an import stage to terminate the import."

    def __init__(self, status):
        super().__init__(MESSAGES[status])
        self.status = status

    @property
    def message(self):
        return str(self)


def get_filepath(args):
    """Return the single filepath in the positional arguments.
    Raise ImportFailure if there is not exactly one.
    """
    if len(args) != 1:
        raise ImportFailure(constants.ARGUMENT_ERROR)
    return args[0]


def open_source(filepath):
    "Return the file opened read-only in binary mode."
    try:
        return open(filepath, "rb")
    except OSError as error:
        logger.debug(f"Could not open '{filepath}': {error}")
        raise ImportFailure(constants.FILE_ERROR)


def get_url(params):
    """Return the URL of the import endpoint.
    The user and password are quoted; the HTTP library unquotes them
    when producing the Basic Authorization header.
    """
    if params.auth:
        user, sep, password = params.auth.partition(":")
        userinfo = urllib.parse.quote(user, safe="")
        if sep:
            userinfo += ":" + urllib.parse.quote(password, safe="")
        userinfo += "@"
    else:
        userinfo = ""
    return (
        f"http://{userinfo}{params.host}:{params.port}{constants.IMPORT_PATH}"
    )


def build_request(session, params, infile):
    """Return the prepared POST request having the open file as body.
    The file is not read here; it is streamed when the request is sent.
    Basic authentication is taken from the URL only, never from '.netrc'.
    """
    url = get_url(params)
    try:
        auth = requests.utils.get_auth_from_url(url)
        request = requests.Request(
            "POST",
            url,
            data=infile,
            headers={"Content-Type": constants.OCTET_STREAM_MIMETYPE},
            auth=auth if any(auth) else None,
        )
        return session.prepare_request(request)
    except (requests.RequestException, ValueError) as error:
        logger.debug(f"Could not build request: {error}")
        raise ImportFailure(constants.CONNECTION_ERROR)


def send_request(session, request):
    """Send the request once; no retries, and the library default timeout.
    Redirects are not followed. Return the response, with its body unread.
    """
    settings = session.merge_environment_settings(request.url, {}, True, None, None)
    try:
        return session.send(request, allow_redirects=False, **settings)
    except (requests.RequestException, OSError) as error:
        logger.debug(f"Could not send request: {error}")
        raise ImportFailure(constants.CONNECTION_ERROR)


def check_response(response):
    """Check that the response status is 200 OK.
    The body is discarded and the response closed.
    """
    try:
        logger.debug(f"Response status {response.status_code}.")
        if response.status_code != http.client.OK:
            raise ImportFailure(constants.AUTH_OR_SERVER_ERROR)
    finally:
        response.close()


def import_file(args, params):
    """Import the file given by the single positional argument
    into the server given by the connection parameters.
    Return the Outcome; exactly one per call.
    """
    try:
        filepath = get_filepath(args)
        with open_source(filepath) as infile:
            with requests.Session() as session:
                request = build_request(session, params, infile)
                logger.debug(f"Uploading '{filepath}' to {params.host}:{params.port}.")
                response = send_request(session, request)
                check_response(response)
    except ImportFailure as failure:
        return Outcome(failure.status, failure.message)
    logger.info(f"Imported '{filepath}'.")
    return Outcome(constants.SUCCESS, f"Imported {filepath}.")
