"""Bind option objects from structured configuration.

Sections are plain mappings, typically loaded from a JSON settings file::

    {
        "AzureAd": {"Instance": "https://login.microsoftonline.com/", "TenantId": "common"},
        "DownstreamApis": {
            "MyProfile": {"BaseUrl": "https://graph.microsoft.com/v1.0", "Scopes": ["user.read"]}
        }
    }

Keys match field names case-insensitively and ignoring underscores, so
``BaseUrl``, ``baseUrl`` and ``base_url`` are equivalent. Function-valued
options (serializer, deserializer, request customizer) are code only and are
rejected when present in configuration.
"""

from __future__ import annotations

import json
import logging
import uuid
from pathlib import Path
from typing import Any, Mapping, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator, model_validator

from .acquire_token_options import AcquireTokenOptions, ManagedIdentityOptions
from .application_options import CredentialDescription, MicrosoftIdentityApplicationOptions
from .downstream_api_options import DownstreamApiOptions
from .enums import CredentialSource
from .exceptions import ConfigurationBindingError

logger = logging.getLogger(__name__)

CODE_ONLY_KEYS = frozenset({"serializer", "deserializer", "customizerequest", "customizehttprequestmessage"})

_ModelT = TypeVar("_ModelT", bound=BaseModel)


def _fold(key: str) -> str:
    return key.replace("_", "").replace("-", "").lower()


class _SettingsModel(BaseModel):
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    @model_validator(mode="before")
    @classmethod
    def _normalize_keys(cls, value: Any) -> Any:
        if not isinstance(value, Mapping):
            return value
        lookup = {_fold(name): name for name in cls.model_fields}
        normalized: dict[str, Any] = {}
        for key, item in value.items():
            folded = _fold(str(key))
            if folded in CODE_ONLY_KEYS:
                raise ValueError(f"'{key}' cannot be set from configuration, it is code only")
            normalized[lookup.get(folded, str(key))] = item
        return normalized


class ManagedIdentitySettings(_SettingsModel):
    user_assigned_client_id: str | None = None


class AcquireTokenSettings(_SettingsModel):
    authentication_options_name: str | None = None
    correlation_id: uuid.UUID | None = None
    extra_query_parameters: dict[str, str] | None = None
    extra_headers_parameters: dict[str, str] | None = None
    extra_parameters: dict[str, Any] | None = None
    claims: str | None = None
    fmi_path: str | None = None
    force_refresh: bool = False
    pop_public_key: str | None = None
    pop_claim: str | None = None
    managed_identity: ManagedIdentitySettings | None = None
    long_running_web_api_session_key: str | None = None
    tenant: str | None = None
    user_flow: str | None = None

    def apply_to(self, options: AcquireTokenOptions) -> AcquireTokenOptions:
        for name in self.model_fields_set:
            value = getattr(self, name)
            if name == "managed_identity" and value is not None:
                value = ManagedIdentityOptions(user_assigned_client_id=value.user_assigned_client_id)
            setattr(options, name, value)
        return options


class DownstreamApiSettings(_SettingsModel):
    # None values are left to the option setters, which reject them where required
    base_url: str | None = None
    relative_path: str | None = ""
    http_method: str | None = "GET"
    protocol_scheme: str | None = "Bearer"
    request_app_token: bool = False
    scopes: list[str] | None = None
    accept_header: str = "application/json"
    content_type: str = "application/json"
    extra_header_parameters: dict[str, str] | None = None
    extra_query_parameters: dict[str, str] | None = None
    acquire_token_options: AcquireTokenSettings | None = None

    @field_validator("scopes", mode="before")
    @classmethod
    def _split_scopes(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.split()
        return value

    def apply_to(self, options: DownstreamApiOptions) -> DownstreamApiOptions:
        """Overlay the keys present in configuration onto ``options``."""
        for name in self.model_fields_set:
            value = getattr(self, name)
            if name == "acquire_token_options":
                if value is not None:
                    value.apply_to(options.acquire_token_options)
                continue
            setattr(options, name, value)
        return options


class CredentialDescriptionSettings(_SettingsModel):
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

    def to_credential(self) -> CredentialDescription:
        return CredentialDescription(**self.model_dump())


class MicrosoftIdentityApplicationSettings(_SettingsModel):
    authority: str | None = None
    client_id: str | None = None
    audience: str | None = None
    audiences: list[str] | None = None
    enable_pii_logging: bool = False
    allow_web_api_to_be_authorized_by_acl: bool = False
    client_credentials: list[CredentialDescriptionSettings] | None = None
    token_decryption_credentials: list[CredentialDescriptionSettings] | None = None
    extra_query_parameters: dict[str, str] | None = None
    instance: str | None = None
    tenant_id: str | None = None
    app_home_tenant_id: str | None = None
    azure_region: str | None = None
    client_capabilities: list[str] | None = None
    send_x5c: bool = False
    with_spa_auth_code: bool = False
    domain: str | None = None
    sign_up_sign_in_policy_id: str | None = None
    edit_profile_policy_id: str | None = None
    reset_password_policy_id: str | None = None

    def to_options(self) -> MicrosoftIdentityApplicationOptions:
        values = self.model_dump(exclude={"client_credentials", "token_decryption_credentials"})
        return MicrosoftIdentityApplicationOptions(
            client_credentials=_credentials(self.client_credentials),
            token_decryption_credentials=_credentials(self.token_decryption_credentials),
            **values,
        )


def _credentials(
    settings: list[CredentialDescriptionSettings] | None,
) -> list[CredentialDescription] | None:
    if settings is None:
        return None
    return [item.to_credential() for item in settings]


def _validate(model: type[_ModelT], section: Any, name: str | None) -> _ModelT:
    try:
        return model.model_validate(section)
    except ValidationError as exc:
        label = name or model.__name__
        raise ConfigurationBindingError(
            f"Invalid configuration section '{label}': {exc.error_count()} error(s)\n{exc}",
            section=name,
            errors=exc.errors(include_url=False),
            cause=exc,
        ) from exc


def bind_downstream_api(
    section: Mapping[str, Any],
    options: DownstreamApiOptions | None = None,
    *,
    name: str | None = None,
) -> DownstreamApiOptions:
    """Bind one downstream API section.

    When ``options`` is given it acts as a template: it is cloned and only
    the keys present in ``section`` are overridden on the clone.
    """
    settings = _validate(DownstreamApiSettings, section, name)
    target = options.clone() if options is not None else DownstreamApiOptions()
    settings.apply_to(target)
    logger.debug("Bound downstream API %s: %r", name or "<unnamed>", target)
    return target


def bind_downstream_apis(
    section: Mapping[str, Any],
    defaults: DownstreamApiOptions | None = None,
) -> dict[str, DownstreamApiOptions]:
    """Bind a section keyed by downstream API name."""
    if not isinstance(section, Mapping):
        raise ConfigurationBindingError(
            f"Downstream APIs section must be a mapping, got {type(section).__name__}",
        )
    return {
        str(name): bind_downstream_api(api_section, defaults, name=str(name))
        for name, api_section in section.items()
    }


def bind_application_options(
    section: Mapping[str, Any],
    *,
    name: str | None = None,
) -> MicrosoftIdentityApplicationOptions:
    settings = _validate(MicrosoftIdentityApplicationSettings, section, name)
    return settings.to_options()


def get_section(configuration: Mapping[str, Any], path: str) -> Any | None:
    """Look up a nested section by a ":"-separated, case-insensitive path."""
    current: Any = configuration
    for part in path.split(":"):
        if not isinstance(current, Mapping):
            return None
        matches = [key for key in current if str(key).lower() == part.lower()]
        if not matches:
            return None
        current = current[matches[0]]
    return current


def load_configuration(path: str | Path) -> dict[str, Any]:
    """Read a JSON settings file."""
    path = Path(path)
    try:
        payload = json.loads(path.read_text())
    except json.JSONDecodeError as exc:
        raise ConfigurationBindingError(f"{path} is not valid JSON: {exc}", cause=exc) from exc
    if not isinstance(payload, dict):
        raise ConfigurationBindingError(f"{path} must contain a JSON object")
    return payload
