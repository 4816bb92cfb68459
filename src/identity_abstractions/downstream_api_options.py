"""Options for calling a named downstream web API."""

from __future__ import annotations

from typing import Any, Callable, Mapping, Sequence

import httpx

from .authorization_header_provider_options import AuthorizationHeaderProviderOptions


class DownstreamApiOptions(AuthorizationHeaderProviderOptions):
    """
    Options passed in to call a downstream web API.

    Adds the HTTP call shaping fields on top of
    ``AuthorizationHeaderProviderOptions``. A typical configuration entry::

        "DownstreamApis": {
            "MyProfile": {
                "BaseUrl": "https://graph.microsoft.com/v1.0",
                "RelativePath": "me/profile",
                "Scopes": ["user.read"],
                "ExtraHeaderParameters": {"OData-Version": "4.0"}
            }
        }

    Args:
        scopes: Scopes required to call the API. For application tokens there
            should be a single scope ending in "/.default".
        serializer: Serializes the request body. Code only, cannot be bound
            from configuration.
        deserializer: Deserializes the response. Code only, cannot be bound
            from configuration.
        accept_header: Value of the Accept header (default: "application/json").
        content_type: Content type of the request body (default: "application/json").
        extra_header_parameters: Headers added to the request to the downstream
            API (not to the identity provider).
        extra_query_parameters: Query parameters added to the request to the
            downstream API (not to the identity provider).

    Remaining keyword arguments are forwarded to ``AuthorizationHeaderProviderOptions``.
    """

    def __init__(
            self,
            *,
            scopes: Sequence[str] | None = None,
            serializer: Callable[[Any], Any] | None = None,
            deserializer: Callable[[httpx.Response], Any] | None = None,
            accept_header: str = "application/json",
            content_type: str = "application/json",
            extra_header_parameters: Mapping[str, str] | None = None,
            extra_query_parameters: Mapping[str, str] | None = None,
            **kwargs: Any,
    ):
        super().__init__(**kwargs)
        self.scopes = scopes
        self.serializer = serializer
        self.deserializer = deserializer
        self.accept_header = accept_header
        self.content_type = content_type
        self.extra_header_parameters = extra_header_parameters
        self.extra_query_parameters = extra_query_parameters

    def _copy_from(self, other: AuthorizationHeaderProviderOptions) -> None:
        super()._copy_from(other)
        if not isinstance(other, DownstreamApiOptions):
            return
        # collections are shared, not copied
        self.scopes = other.scopes
        self.serializer = other.serializer
        self.deserializer = other.deserializer
        self.accept_header = other.accept_header
        self.content_type = other.content_type
        self.extra_header_parameters = other.extra_header_parameters
        self.extra_query_parameters = other.extra_query_parameters
