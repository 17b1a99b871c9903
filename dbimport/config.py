"Configuration."

import collections
import json
import logging
import os
import os.path

import jsonschema

import dbimport.schema
from dbimport import constants

logger = logging.getLogger(__name__)

# Default configurable values; modified by reading JSON file in 'get_settings'.
DEFAULT_SETTINGS = dict(
    AUTH=constants.DEFAULT_AUTH,
    HOST=constants.DEFAULT_HOST,
    PORT=constants.DEFAULT_PORT,
    LOG_LEVEL="WARNING",
)

# Connection parameters for one import; immutable.
ConnectionParams = collections.namedtuple("ConnectionParams", ["auth", "host", "port"])


def get_settings(filepath=None):
    """Return the settings: the defaults modified by a JSON settings file.
    The file is the one given, else the one named by the environment variable,
    else the optional file in the home directory.
    Raise ValueError if the settings file is required but missing, or invalid.
    """
    result = DEFAULT_SETTINGS.copy()
    required = True
    if filepath is None:
        try:
            filepath = os.environ[constants.SETTINGS_ENVVAR]
        except KeyError:
            filepath = os.path.expanduser(constants.SETTINGS_FILEPATH)
            required = False
    try:
        with open(filepath) as infile:
            config = json.load(infile)
    except FileNotFoundError:
        if required:
            raise ValueError(f"No such settings file '{filepath}'.")
        return result
    except (OSError, json.JSONDecodeError) as error:
        raise ValueError(f"Could not read settings file '{filepath}': {error}")
    try:
        jsonschema.validate(instance=config, schema=dbimport.schema.settings)
    except jsonschema.ValidationError as error:
        raise ValueError(f"Invalid settings file '{filepath}': {error.message}")
    for key in config.keys():
        if key not in DEFAULT_SETTINGS:
            logger.warning(f"Obsolete item '{key}' in settings file.")
    result.update(config)
    result["PORT"] = str(result["PORT"])
    logger.debug(f"Read settings file '{filepath}'.")
    return result


def get_params(settings, auth=None, host=None, port=None):
    """Return the connection parameters.
    An explicitly given value takes precedence over the settings value.
    """
    if auth is None:
        auth = settings["AUTH"]
    if host is None:
        host = settings["HOST"]
    if port is None:
        port = settings["PORT"]
    return ConnectionParams(auth=auth, host=host, port=str(port))
