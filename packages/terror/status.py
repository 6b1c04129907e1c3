"""HTTP status codes used when normalizing Python exceptions."""

BAD_REQUEST = 400
FORBIDDEN = 403
NOT_FOUND = 404
CONFLICT = 409
INTERNAL_SERVER_ERROR = 500
NOT_IMPLEMENTED = 501
SERVICE_UNAVAILABLE = 503
GATEWAY_TIMEOUT = 504

# Statuses travel as unsigned 16-bit integers.
STATUS_MIN = 0
STATUS_MAX = 65535
