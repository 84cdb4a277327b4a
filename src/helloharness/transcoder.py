"""RequestResponseTranscoder: load, parse, build, serialize and report a request."""

from __future__ import annotations

import json
import logging
import sys
import unicodedata
from collections import Counter
from pathlib import Path
from typing import Any, TextIO

import pydantic
from pydantic_core import PydanticSerializationError

from helloharness.config import Config
from helloharness.errors import InputLoadError, ParseError, SerializeError
from helloharness.models import GREETING_PREFIX, MyRequest, MyResponse

__all__ = [
    "RequestResponseTranscoder",
    "load_input",
    "parse_request",
    "build_response",
    "serialize_response",
    "quote",
    "report",
    "report_request",
    "report_response",
    "transcode",
]

logger = logging.getLogger(__name__)

REQUEST_LABEL = "request_json = "
RESPONSE_LABEL = "response_json = "

_DEBUG_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\0": "\\0",
    "\t": "\\t",
    "\r": "\\r",
    "\n": "\\n",
}

# Control, format, separator, private-use, unassigned and grapheme-extending marks.
_NON_PRINTABLE_CATEGORIES = frozenset({"Cc", "Cf", "Zl", "Zp", "Co", "Cn", "Mn", "Me"})



def load_input(path: str | Path) -> str:
    """Read the whole request file as UTF-8 text.

    Line endings are kept as stored on disk. Any failure to open, read or
    decode the file raises InputLoadError with the original exception chained.
    """
    file_path = Path(path)
    try:
        with open(file_path, encoding="utf-8", newline="") as f:
            text = f.read()
    except UnicodeDecodeError as e:
        raise InputLoadError(path=str(file_path), reason=f"not valid UTF-8: {e.reason}", cause=e) from e
    except OSError as e:
        raise InputLoadError(path=str(file_path), reason=e.strerror or str(e), cause=e) from e
    logger.debug("Loaded %d characters from %s", len(text), file_path)
    return text


def _validation_errors(error: pydantic.ValidationError) -> list[dict[str, Any]]:
    return [
        {
            "field": ".".join(str(loc) for loc in err["loc"]),
            "code": err["type"],
            "message": err["msg"],
        }
        for err in error.errors()
    ]


def _duplicate_fields(text: str | bytes) -> list[str]:
    """Return declared fields given more than once in the top-level object."""
    pairs = json.loads(text, object_pairs_hook=list)
    counts = Counter(key for key, _ in pairs)
    return [key for key, count in counts.items() if count > 1 and key in MyRequest.model_fields]


def parse_request(text: str | bytes) -> MyRequest:
    """Decode request JSON into a MyRequest. Raises ParseError on failure.

    A declared field given twice is rejected; repeated unknown keys are ignored.
    """
    try:
        request = MyRequest.model_validate_json(text)
    except pydantic.ValidationError as e:
        errors = _validation_errors(e)
        message = "; ".join(
            f"{err['field']}: {err['message']}" if err["field"] else err["message"] for err in errors
        )
        raise ParseError(message=message, errors=errors, cause=e) from e

    duplicates = _duplicate_fields(text)
    if duplicates:
        errors = [
            {"field": name, "code": "duplicate_field", "message": f"duplicate field `{name}`"}
            for name in duplicates
        ]
        raise ParseError(message="; ".join(f"{err['field']}: {err['message']}" for err in errors), errors=errors)

    logger.debug("Parsed request of type %s", MyRequest.type_name())
    return request


def build_response(request: MyRequest) -> MyResponse:
    """Build the greeting response. The input text is used verbatim."""
    return MyResponse(output=GREETING_PREFIX + request.input)


def serialize_response(response: MyResponse) -> str:
    """Encode a response as compact JSON with ``class`` before ``output``."""
    try:
        return response.model_dump_json(by_alias=True)
    except PydanticSerializationError as e:
        raise SerializeError(message=str(e), cause=e) from e


def transcode(text: str | bytes) -> str:
    """Parse request text and return the serialized response text."""
    return serialize_response(build_response(parse_request(text)))


def quote(text: str) -> str:
    """Render text as a double-quoted debug literal.

    Quotes, backslashes and the \\0, \\t, \\r, \\n controls get backslash escapes.
    Other non-printable characters are written as ``\\u{hex}``.
    """
    parts = ['"']
    for ch in text:
        escaped = _DEBUG_ESCAPES.get(ch)
        if escaped is None:
            if unicodedata.category(ch) in _NON_PRINTABLE_CATEGORIES:
                escaped = f"\\u{{{ord(ch):x}}}"
            else:
                escaped = ch
        parts.append(escaped)
    parts.append('"')
    return "".join(parts)


def report_request(input_text: str, stream: TextIO | None = None) -> None:
    """Write the raw request text after its label."""
    out = stream if stream is not None else sys.stdout
    print(f"{REQUEST_LABEL}{input_text}", file=out)


def report_response(output_text: str, stream: TextIO | None = None) -> None:
    """Write the response text, quoted, after its label."""
    out = stream if stream is not None else sys.stdout
    print(f"{RESPONSE_LABEL}{quote(output_text)}", file=out)


def report(input_text: str, output_text: str, stream: TextIO | None = None) -> None:
    """Write both report lines: the request raw, the response quoted."""
    report_request(input_text, stream)
    report_response(output_text, stream)


class RequestResponseTranscoder:
    """Runs the load -> parse -> build -> serialize -> report pipeline once per call.

    Errors propagate to the caller; nothing here exits the process.
    """

    def __init__(self, config: Config | None = None, stream: TextIO | None = None) -> None:
        self._config = config or Config()
        self._stream = stream

    @property
    def config(self) -> Config:
        return self._config

    def run(self, path: str | Path | None = None) -> str:
        """Process the request file at ``path`` (or the configured path).

        The request line is written as soon as the file is read, so a parse
        failure leaves it in the output with no response line after it.

        Returns:
            The serialized response JSON text.
        """
        request_path = Path(path) if path is not None else self._config.request_path
        logger.info("Transcoding request file %s", request_path)

        input_text = load_input(request_path)
        report_request(input_text, self._stream)

        request = parse_request(input_text)
        response = build_response(request)
        output_text = serialize_response(response)
        logger.debug("Serialized %s (%d characters)", MyResponse.type_name(), len(output_text))

        report_response(output_text, self._stream)
        return output_text
