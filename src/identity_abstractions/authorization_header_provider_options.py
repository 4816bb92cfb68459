"""Options for creating an authorization header for a downstream API."""

from __future__ import annotations

from typing import Any

from .call_options import CallOptionsBase


class AuthorizationHeaderProviderOptions(CallOptionsBase):
    """
    Options used to build the authorization header sent to a downstream API.

    Args:
        base_url: Base URL of the downstream API, e.g. "https://graph.microsoft.com/beta/".
        relative_path: Path appended to ``base_url`` (for instance "me").
        http_method: HTTP method of the call (default: GET). Custom verbs such as MERGE are accepted.
        protocol_scheme: Scheme used to format the authorization header (default: "Bearer").
        request_app_token: Request a token for the application itself rather than for the user.
        acquire_token_options: Token acquisition options. A fresh default instance is used when omitted.
        customize_request: Called with the assembled ``httpx.Request`` after the
            Authorization header is attached and just before it is sent.
    """

    def __init__(self, *, request_app_token: bool = False, **kwargs: Any):
        super().__init__(**kwargs)
        self.request_app_token = request_app_token

    @classmethod
    def _copy_source_type(cls) -> type:
        return AuthorizationHeaderProviderOptions

    def _copy_from(self, other: "AuthorizationHeaderProviderOptions") -> None:  # type: ignore[override]
        super()._copy_from(other)
        self.request_app_token = other.request_app_token
