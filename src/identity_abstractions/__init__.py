"""
identity-abstractions

Option objects describing how an application acquires tokens and calls
downstream web APIs: base URL, HTTP method, scopes, protocol scheme,
serialization hooks and extra headers or query parameters.
"""

from .acquire_token_options import (
    LONG_RUNNING_WEB_API_SESSION_KEY_AUTO,
    AcquireTokenOptions,
    ManagedIdentityOptions,
)
from .application_options import (
    CredentialDescription,
    IdentityApplicationOptions,
    MicrosoftIdentityApplicationOptions,
)
from .authorization_header_provider_options import AuthorizationHeaderProviderOptions
from .binding import bind_application_options, bind_downstream_api, bind_downstream_apis
from .downstream_api_options import DownstreamApiOptions
from .enums import CredentialSource, HttpMethod
from .exceptions import ConfigurationBindingError, IdentityAbstractionsError, InvalidOptionError
from .request_options import DownstreamRestApiOptions, RequestOptions

__all__ = [
    "LONG_RUNNING_WEB_API_SESSION_KEY_AUTO",
    "AcquireTokenOptions",
    "AuthorizationHeaderProviderOptions",
    "ConfigurationBindingError",
    "CredentialDescription",
    "CredentialSource",
    "DownstreamApiOptions",
    "DownstreamRestApiOptions",
    "HttpMethod",
    "IdentityAbstractionsError",
    "IdentityApplicationOptions",
    "InvalidOptionError",
    "ManagedIdentityOptions",
    "MicrosoftIdentityApplicationOptions",
    "RequestOptions",
    "bind_application_options",
    "bind_downstream_api",
    "bind_downstream_apis",
]
