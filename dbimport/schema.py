"Settings file JSON schema."

from . import constants


settings = {
    "$id": "/settings",
    "$schema": constants.JSON_SCHEMA_URL,
    "title": "Settings file for the import command.",
    "type": "object",
    "properties": {
        "AUTH": {"type": "string"},
        "HOST": {"type": "string", "minLength": 1},
        "PORT": {
            "oneOf": [
                {"type": "string", "pattern": "^[0-9]+$"},
                {"type": "integer", "minimum": 1, "maximum": 65535},
            ]
        },
        "LOG_LEVEL": {"type": "string", "enum": list(constants.LOG_LEVELS)},
    },
}
