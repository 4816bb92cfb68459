"""Enumerations shared by the option classes."""

from __future__ import annotations

from enum import Enum


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"
    CONNECT = "CONNECT"
    TRACE = "TRACE"

    def __str__(self) -> str:
        return self.value


class CredentialSource(str, Enum):
    """Where a client or token decryption credential is loaded from."""

    CERTIFICATE = "Certificate"
    KEY_VAULT = "KeyVault"
    BASE64_ENCODED = "Base64Encoded"
    PATH = "Path"
    STORE_WITH_THUMBPRINT = "StoreWithThumbprint"
    STORE_WITH_DISTINGUISHED_NAME = "StoreWithDistinguishedName"
    CLIENT_SECRET = "ClientSecret"
    SIGNED_ASSERTION_FROM_MANAGED_IDENTITY = "SignedAssertionFromManagedIdentity"
    SIGNED_ASSERTION_FILE_PATH = "SignedAssertionFilePath"
    SIGNED_ASSERTION_FROM_VAULT = "SignedAssertionFromVault"
    AUTO_DECRYPT_KEYS = "AutoDecryptKeys"
    CUSTOM_SIGNED_ASSERTION = "CustomSignedAssertion"

    def __str__(self) -> str:
        return self.value
