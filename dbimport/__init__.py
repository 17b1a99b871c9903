"dbimport: Stream a local backup file into a running database server."

import os.path

__version__ = "1.0.0"


class Constants:
    VERSION = __version__
    ROOT = os.path.dirname(os.path.abspath(__file__))

    JSON_SCHEMA_URL = "http://json-schema.org/draft-07/schema#"

    # Connection defaults.
    DEFAULT_AUTH = "root:root"
    DEFAULT_HOST = "127.0.0.1"
    DEFAULT_PORT = "8000"

    # Server endpoint receiving the backup file.
    IMPORT_PATH = "/import"

    # Settings file.
    SETTINGS_ENVVAR = "DBIMPORT_SETTINGS_FILEPATH"
    SETTINGS_FILEPATH = "~/.dbimport.json"
    LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

    # Import outcomes.
    SUCCESS = "success"
    ARGUMENT_ERROR = "argument_error"
    FILE_ERROR = "file_error"
    CONNECTION_ERROR = "connection_error"
    AUTH_OR_SERVER_ERROR = "auth_or_server_error"
    OUTCOMES = (
        SUCCESS,
        ARGUMENT_ERROR,
        FILE_ERROR,
        CONNECTION_ERROR,
        AUTH_OR_SERVER_ERROR,
    )

    # Operator guidance messages.
    ARGUMENT_MESSAGE = "No filepath provided."
    FILE_MESSAGE = "Import failed - please check the filepath and try again."
    CONNECTION_MESSAGE = (
        "Connection failed - check the connection details and try again."
    )

    # MIME types.
    OCTET_STREAM_MIMETYPE = "application/octet-stream"

    def __setattr__(self, key, value):
        raise ValueError("cannot set constant")


constants = Constants()
