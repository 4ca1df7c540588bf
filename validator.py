import jsonschema

from recording_logger import LEVELS

OPTIONS_SCHEMA = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "LogBridge options",
    "type": "object",
    "properties": {
        "default_level": {"enum": list(LEVELS)},
        "response_level": {"enum": list(LEVELS)},
        "error_level": {"enum": list(LEVELS)},
        "log_payload": {"type": "boolean"},
        "log_query": {"type": "boolean"},
        "log_errors": {"type": "boolean"},
        "ignore_paths": {
            "type": "array",
            "items": {"type": "string", "pattern": "^/"},
            "uniqueItems": True,
        },
    },
    "required": [
        "default_level",
        "response_level",
        "error_level",
        "log_payload",
        "log_query",
        "log_errors",
        "ignore_paths",
    ],
    "additionalProperties": False,
}


class OptionsValidator:
    """Validates LogBridge options against a JSON schema."""

    def __init__(self, schema=None):
        self._validator = jsonschema.Draft202012Validator(schema or OPTIONS_SCHEMA)

    def validate(self, options):
        """Validate an options dict against the schema.

        Returns:
            tuple: (is_valid: bool, errors: list[str])
        """
        errors = sorted(self._validator.iter_errors(options), key=lambda e: [str(p) for p in e.path])
        if not errors:
            return True, []

        error_messages = []
        for error in errors:
            location = ".".join(str(part) for part in error.path) or "<options>"
            error_messages.append(f"{location}: {error.message}")
        return False, error_messages

    def check(self, options):
        """Raise ValueError if ``options`` do not satisfy the schema."""
        is_valid, errors = self.validate(options)
        if not is_valid:
            raise ValueError("Invalid log_bridge options: " + "; ".join(errors))
