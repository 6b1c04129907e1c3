"""Structured, serializable error objects for service responses and logs."""

from .builder import ErrorBuilder, create, from_error
from .capabilities import Capabilities, Capability, deployment_capabilities
from .codec import ErrorDocument, decode, encode, from_json, to_json
from .details import (
    BooleanDetail,
    DetailValue,
    IntegerDetail,
    NullDetail,
    StructuredDetail,
    TextDetail,
    detail_from_document,
    detail_from_value,
    structured,
)
from .exceptions import (
    BuilderConsumedError,
    CapabilityDisabledError,
    DecodeProblem,
    DetailSerializationError,
    ErrorDecodeError,
    TerrorError,
)
from .formatting import format_error
from .normalize import exception_to_builder
from .object import MDN_STATUS_REF, ErrorObject, reference_for

__version__ = "0.3.0"

__all__ = [
    "MDN_STATUS_REF",
    "BooleanDetail",
    "BuilderConsumedError",
    "Capabilities",
    "Capability",
    "CapabilityDisabledError",
    "DecodeProblem",
    "DetailSerializationError",
    "DetailValue",
    "ErrorBuilder",
    "ErrorDecodeError",
    "ErrorDocument",
    "ErrorObject",
    "IntegerDetail",
    "NullDetail",
    "StructuredDetail",
    "TerrorError",
    "TextDetail",
    "create",
    "decode",
    "deployment_capabilities",
    "detail_from_document",
    "detail_from_value",
    "encode",
    "exception_to_builder",
    "format_error",
    "from_error",
    "from_json",
    "reference_for",
    "structured",
    "to_json",
]
