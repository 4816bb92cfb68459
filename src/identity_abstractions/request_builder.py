"""Assemble ``httpx`` requests from downstream API options.

Nothing here sends a request: the caller owns the transport and passes the
returned ``httpx.Request`` to its own ``httpx.Client.send``.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Union

import httpx

from .downstream_api_options import DownstreamApiOptions
from .request_options import DownstreamRestApiOptions
from .security import sanitize_headers

logger = logging.getLogger(__name__)

CallOptions = Union[DownstreamApiOptions, DownstreamRestApiOptions]


def format_authorization_header(protocol_scheme: str, token: str) -> str:
    return f"{protocol_scheme} {token}"


def serialize_body(options: CallOptions, body: Any) -> str | bytes | None:
    """Turn ``body`` into request content.

    The options' serializer wins when set. Otherwise strings and bytes are
    sent as is and anything else is encoded as JSON.
    """
    if options.serializer is not None:
        return options.serializer(body)
    if body is None:
        return None
    if isinstance(body, (str, bytes)):
        return body
    return json.dumps(body)


def build_request(
    options: CallOptions,
    authorization_header: str | None = None,
    *,
    body: Any = None,
) -> httpx.Request:
    """Build the request described by ``options``.

    ``customize_request`` is invoked last, once the Authorization header is
    attached.
    """
    headers: dict[str, str] = {"Accept": options.accept_header}
    if options.extra_header_parameters:
        headers.update({str(k): str(v) for k, v in options.extra_header_parameters.items()})

    content = serialize_body(options, body)
    if content is not None:
        headers["Content-Type"] = options.content_type

    if authorization_header:
        headers["Authorization"] = authorization_header

    params = dict(options.extra_query_parameters) if options.extra_query_parameters else None
    request = httpx.Request(
        str(options.http_method),
        options.get_api_url(),
        params=params,
        headers=headers,
        content=content,
    )

    if options.customize_request is not None:
        options.customize_request(request)

    logger.debug(
        "Built %s %s headers=%s",
        request.method,
        request.url,
        sanitize_headers(dict(request.headers)),
    )
    return request


def read_response(options: CallOptions, response: httpx.Response) -> Any:
    """Turn a downstream API response into the caller's output object."""
    if options.deserializer is not None:
        return options.deserializer(response)
    if response.status_code == 204:
        return None
    if not response.content:
        return None
    content_type = response.headers.get("content-type", "")
    if "json" not in content_type.lower():
        return response.text
    return response.json()
