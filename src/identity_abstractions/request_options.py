"""Per-call options for a downstream REST API."""

from __future__ import annotations

from typing import Any, Callable, Mapping, Sequence

import httpx

from .call_options import CallOptionsBase


class DownstreamRestApiOptions(CallOptionsBase):
    """
    Options passed in to call a downstream REST API.

    Start from a shared template and ``clone()`` it per call before
    overriding fields. The clone owns its own ``acquire_token_options`` but
    shares ``scopes`` and the header and query mappings with the template:
    assign a new container on the clone instead of mutating the shared one.

    Args:
        base_url: Base URL of the API, e.g. "https://graph.microsoft.com/beta/".
        relative_path: Path appended to ``base_url``.
        http_method: HTTP method (default: GET). Custom verbs such as PROPFIND are accepted.
        protocol_scheme: Authorization header scheme (default: "Bearer").
        scopes: Scopes requested for the call.
        extra_header_parameters: Extra headers for the API request.
        extra_query_parameters: Extra query parameters for the API request.
        acquire_token_options: Token acquisition options. A fresh default instance is used when omitted.
        customize_request: Hook called with the ``httpx.Request`` right before it is sent.
        serializer: Turns the input object into request content.
        deserializer: Turns the ``httpx.Response`` into the output object.
        accept_header: Accept header (default: "application/json").
        content_type: Request body content type (default: "application/json").
    """

    def __init__(
            self,
            *,
            scopes: Sequence[str] | None = None,
            extra_header_parameters: Mapping[str, str] | None = None,
            extra_query_parameters: Mapping[str, str] | None = None,
            serializer: Callable[[Any], Any] | None = None,
            deserializer: Callable[[httpx.Response], Any] | None = None,
            accept_header: str = "application/json",
            content_type: str = "application/json",
            **kwargs: Any,
    ):
        super().__init__(**kwargs)
        self.scopes = scopes
        self.extra_header_parameters = extra_header_parameters
        self.extra_query_parameters = extra_query_parameters
        self.serializer = serializer
        self.deserializer = deserializer
        self.accept_header = accept_header
        self.content_type = content_type

    @classmethod
    def _copy_source_type(cls) -> type:
        return DownstreamRestApiOptions

    def _copy_from(self, other: "DownstreamRestApiOptions") -> None:  # type: ignore[override]
        super()._copy_from(other)
        self.scopes = other.scopes
        self.extra_header_parameters = other.extra_header_parameters
        self.extra_query_parameters = other.extra_query_parameters
        self.serializer = other.serializer
        self.deserializer = other.deserializer
        self.accept_header = other.accept_header
        self.content_type = other.content_type


RequestOptions = DownstreamRestApiOptions
