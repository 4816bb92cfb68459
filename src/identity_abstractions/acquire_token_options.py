"""Token acquisition parameters nested inside the downstream API options."""

from __future__ import annotations

import dataclasses
import uuid
from dataclasses import dataclass
from typing import Any, Mapping

LONG_RUNNING_WEB_API_SESSION_KEY_AUTO = "AllocateForMe"


@dataclass
class ManagedIdentityOptions:
    """Selects the managed identity used to acquire tokens.

    Attributes:
        user_assigned_client_id: Client id of a user-assigned managed identity.
            ``None`` selects the system-assigned identity.
    """

    user_assigned_client_id: str | None = None

    def clone(self) -> "ManagedIdentityOptions":
        return dataclasses.replace(self)


@dataclass
class AcquireTokenOptions:
    """Options passed to the token acquisition layer.

    These shape the request sent to the identity provider, not the request
    sent to the downstream API.

    Attributes:
        authentication_options_name: Name of the authentication scheme whose
            application options are used.
        correlation_id: Correlation id propagated to the identity provider.
        extra_query_parameters: Query parameters added to the token request.
        extra_headers_parameters: Headers added to the token request.
        extra_parameters: Opaque values handed to token acquisition extensions.
        claims: Claims challenge returned by a previous call.
        fmi_path: Federated managed identity path.
        force_refresh: Bypass the token cache.
        pop_public_key: Public key (or key id) used for proof-of-possession.
        pop_claim: JWK claim used for proof-of-possession.
        managed_identity: Request the token with a managed identity.
        long_running_web_api_session_key: Key of a long-running on-behalf-of
            session. Use ``LONG_RUNNING_WEB_API_SESSION_KEY_AUTO`` to let the
            token layer allocate one.
        tenant: Tenant overriding the one from the application options.
        user_flow: B2C user flow overriding the default one.
    """

    authentication_options_name: str | None = None
    correlation_id: uuid.UUID | None = None
    extra_query_parameters: Mapping[str, str] | None = None
    extra_headers_parameters: Mapping[str, str] | None = None
    extra_parameters: Mapping[str, Any] | None = None
    claims: str | None = None
    fmi_path: str | None = None
    force_refresh: bool = False
    pop_public_key: str | None = None
    pop_claim: str | None = None
    managed_identity: ManagedIdentityOptions | None = None
    long_running_web_api_session_key: str | None = None
    tenant: str | None = None
    user_flow: str | None = None

    def clone(self) -> "AcquireTokenOptions":
        """Return an independent copy.

        Mappings are shared with the source; assign a new mapping on the
        copy to diverge.
        """
        managed_identity = self.managed_identity.clone() if self.managed_identity is not None else None
        return dataclasses.replace(self, managed_identity=managed_identity)
