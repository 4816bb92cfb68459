"""Application-level identity options and the authority they resolve to."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Sequence

from .enums import CredentialSource


@dataclass
class CredentialDescription:
    """Describes a client credential or a token decryption credential.

    Only the fields relevant to ``source_type`` are read by the token layer.
    """

    source_type: CredentialSource
    client_secret: str | None = None
    base64_encoded_value: str | None = None
    certificate_disk_path: str | None = None
    certificate_password: str | None = None
    key_vault_url: str | None = None
    key_vault_certificate_name: str | None = None
    certificate_store_path: str | None = None
    certificate_thumbprint: str | None = None
    certificate_distinguished_name: str | None = None
    managed_identity_client_id: str | None = None
    signed_assertion_file_disk_path: str | None = None
    custom_signed_assertion_provider_name: str | None = None
    skip: bool = False


class IdentityApplicationOptions:
    """
    Options of an application registered with an identity provider.

    Args:
        authority: Authority URL of the identity provider, stored verbatim.
        client_id: Application (client) id.
        audience: Expected audience of tokens received by a web API.
        audiences: Accepted audiences when more than one is valid.
        enable_pii_logging: Allow personal data in identity library logs.
        allow_web_api_to_be_authorized_by_acl: Accept app tokens without roles.
        client_credentials: Credentials proving the application's identity.
        token_decryption_credentials: Credentials used to decrypt tokens.
        extra_query_parameters: Query parameters sent to the authority.
    """

    def __init__(
            self,
            *,
            authority: str | None = None,
            client_id: str | None = None,
            audience: str | None = None,
            audiences: Sequence[str] | None = None,
            enable_pii_logging: bool = False,
            allow_web_api_to_be_authorized_by_acl: bool = False,
            client_credentials: Sequence[CredentialDescription] | None = None,
            token_decryption_credentials: Sequence[CredentialDescription] | None = None,
            extra_query_parameters: Mapping[str, str] | None = None,
    ):
        self._authority = authority
        self.client_id = client_id
        self.audience = audience
        self.audiences = audiences
        self.enable_pii_logging = enable_pii_logging
        self.allow_web_api_to_be_authorized_by_acl = allow_web_api_to_be_authorized_by_acl
        self.client_credentials = client_credentials
        self.token_decryption_credentials = token_decryption_credentials
        self.extra_query_parameters = extra_query_parameters

    @property
    def authority(self) -> str | None:
        return self._authority

    @authority.setter
    def authority(self, value: str | None) -> None:
        self._authority = value


class MicrosoftIdentityApplicationOptions(IdentityApplicationOptions):
    """
    Application options for the Microsoft identity platform and Azure AD B2C.

    ``authority`` is derived from ``instance`` and ``tenant_id`` (or, for B2C,
    ``instance``, ``domain`` and the sign-up/sign-in policy) until it is
    assigned explicitly. An explicit value is then returned verbatim.
    Assigning ``None`` goes back to the derived value.

    Args:
        instance: Cloud instance, e.g. "https://login.microsoftonline.com/".
        tenant_id: Tenant id or domain, or "common" / "organizations" / "consumers".
        app_home_tenant_id: Home tenant of the application registration.
        azure_region: Azure region used for regional token endpoints.
        client_capabilities: Capabilities advertised to the identity provider (e.g. "cp1").
        send_x5c: Send the certificate chain with client assertions.
        with_spa_auth_code: Request a SPA authorization code in hybrid flows.
        domain: B2C tenant domain.
        sign_up_sign_in_policy_id: B2C sign-up/sign-in policy; enables B2C mode.
        edit_profile_policy_id: B2C edit profile policy.
        reset_password_policy_id: B2C password reset policy.

    Remaining keyword arguments are forwarded to ``IdentityApplicationOptions``.
    """

    def __init__(
            self,
            *,
            instance: str | None = None,
            tenant_id: str | None = None,
            app_home_tenant_id: str | None = None,
            azure_region: str | None = None,
            client_capabilities: Sequence[str] | None = None,
            send_x5c: bool = False,
            with_spa_auth_code: bool = False,
            domain: str | None = None,
            sign_up_sign_in_policy_id: str | None = None,
            edit_profile_policy_id: str | None = None,
            reset_password_policy_id: str | None = None,
            **kwargs: Any,
    ):
        super().__init__(**kwargs)
        self.instance = instance
        self.tenant_id = tenant_id
        self.app_home_tenant_id = app_home_tenant_id
        self.azure_region = azure_region
        self.client_capabilities = client_capabilities
        self.send_x5c = send_x5c
        self.with_spa_auth_code = with_spa_auth_code
        self.domain = domain
        self.sign_up_sign_in_policy_id = sign_up_sign_in_policy_id
        self.edit_profile_policy_id = edit_profile_policy_id
        self.reset_password_policy_id = reset_password_policy_id

    @property
    def default_user_flow(self) -> str | None:
        return self.sign_up_sign_in_policy_id

    @property
    def is_b2c(self) -> bool:
        return bool(self.default_user_flow and self.default_user_flow.strip())

    @property
    def authority(self) -> str | None:
        if self._authority is not None:
            return self._authority
        if not self.instance:
            return None
        instance = self.instance.rstrip("/")
        if self.is_b2c:
            if not self.domain:
                return None
            return f"{instance}/{self.domain}/{self.default_user_flow}/v2.0"
        if not self.tenant_id:
            return None
        return f"{instance}/{self.tenant_id}/v2.0"

    @authority.setter
    def authority(self, value: str | None) -> None:
        self._authority = value
