"""Fail-fast coercion helpers used by the option setters."""

from __future__ import annotations

import re
from typing import Any

from .acquire_token_options import AcquireTokenOptions
from .enums import HttpMethod
from .exceptions import InvalidOptionError

# RFC 9110 token characters
_METHOD_TOKEN = re.compile(r"^[!#$%&'*+\-.^_`|~0-9A-Za-z]+$")


def coerce_http_method(value: Any) -> HttpMethod | str:
    """Return the well-known ``HttpMethod`` member, or the upper-cased custom verb (e.g. MERGE)."""
    if value is None:
        raise InvalidOptionError("HTTP method cannot be None", option_name="http_method")
    if isinstance(value, HttpMethod):
        return value
    if not isinstance(value, str) or not value.strip():
        raise InvalidOptionError("HTTP method must be a non-empty string", option_name="http_method")
    method = value.strip().upper()
    if not _METHOD_TOKEN.match(method):
        raise InvalidOptionError(f"Invalid HTTP method token: {value!r}", option_name="http_method")
    try:
        return HttpMethod(method)
    except ValueError:
        return method


def require_protocol_scheme(value: Any) -> str:
    if not value:
        raise InvalidOptionError("protocol scheme cannot be None or empty", option_name="protocol_scheme")
    if not isinstance(value, str):
        raise InvalidOptionError("protocol scheme must be a string", option_name="protocol_scheme")
    return value


def require_acquire_token_options(value: Any) -> AcquireTokenOptions:
    if value is None:
        raise InvalidOptionError("token acquisition options cannot be None", option_name="acquire_token_options")
    if not isinstance(value, AcquireTokenOptions):
        raise InvalidOptionError(
            f"expected AcquireTokenOptions, got {type(value).__name__}",
            option_name="acquire_token_options",
        )
    return value
