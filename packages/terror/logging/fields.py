"""Canonical logging field names.

These constants define a stable key set for structured logs and context
propagation.
"""

TIMESTAMP = "timestamp"
LEVEL = "level"
LOGGER = "logger"
MESSAGE = "message"

# Error-object fields.
STATUS = "status"
ERROR_CODE = "error_code"
ERROR_ID = "error_id"
TAGS = "tags"
ERROR = "error"
ERROR_FIELDS = (STATUS, ERROR_CODE, ERROR_ID, TAGS)

# Common service-level fields.
SERVICE = "service"
ENVIRONMENT = "environment"
