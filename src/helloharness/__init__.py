"""helloharness - helloworld request/response transcoding harness."""

from __future__ import annotations

# Pipeline
from helloharness.transcoder import (
    RequestResponseTranscoder,
    build_response,
    load_input,
    parse_request,
    report,
    serialize_response,
    transcode,
)

# Model types
from helloharness.models import GREETING_PREFIX, MY_RESPONSE_CLASS, NAMESPACE, MyRequest, MyResponse

# Config
from helloharness.config import Config

# Errors
from helloharness.errors import (
    ConfigError,
    ConfigNotFoundError,
    ErrorCodes,
    HarnessError,
    InputLoadError,
    ParseError,
    SerializeError,
)

__version__ = "0.1.0"

__all__ = [
    # Pipeline
    "RequestResponseTranscoder",
    "load_input",
    "parse_request",
    "build_response",
    "serialize_response",
    "report",
    "transcode",
    # Model types
    "MyRequest",
    "MyResponse",
    "NAMESPACE",
    "GREETING_PREFIX",
    "MY_RESPONSE_CLASS",
    # Config
    "Config",
    # Errors
    "ErrorCodes",
    "HarnessError",
    "InputLoadError",
    "ParseError",
    "SerializeError",
    "ConfigError",
    "ConfigNotFoundError",
]
