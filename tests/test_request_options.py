from __future__ import annotations

import pytest

from identity_abstractions.acquire_token_options import AcquireTokenOptions, ManagedIdentityOptions
from identity_abstractions.downstream_api_options import DownstreamApiOptions
from identity_abstractions.enums import HttpMethod
from identity_abstractions.exceptions import InvalidOptionError
from identity_abstractions.request_options import DownstreamRestApiOptions, RequestOptions


class _TracedRestApiOptions(DownstreamRestApiOptions):
    pass


def _populated() -> DownstreamRestApiOptions:
    return DownstreamRestApiOptions(
        base_url="https://graph.microsoft.com/v1.0/",
        relative_path="me/profile",
        http_method="post",
        protocol_scheme="PoP",
        scopes=["user.read", "mail.read"],
        extra_header_parameters={"OData-Version": "4.0"},
        extra_query_parameters={"$filter": "displayName eq 'John'"},
        acquire_token_options=AcquireTokenOptions(
            tenant="contoso.onmicrosoft.com",
            force_refresh=True,
            managed_identity=ManagedIdentityOptions(user_assigned_client_id="mi-client"),
        ),
        customize_request=lambda request: None,
        serializer=lambda body: str(body),
        deserializer=lambda response: response.text,
        accept_header="application/xml",
        content_type="text/plain",
    )


def test_defaults() -> None:
    options = DownstreamRestApiOptions()

    assert options.http_method is HttpMethod.GET
    assert options.protocol_scheme == "Bearer"
    assert options.accept_header == "application/json"
    assert options.content_type == "application/json"
    assert options.relative_path == ""
    assert options.base_url is None
    assert options.scopes is None
    assert options.extra_header_parameters is None
    assert options.extra_query_parameters is None
    assert options.serializer is None
    assert options.deserializer is None
    assert options.customize_request is None
    assert isinstance(options.acquire_token_options, AcquireTokenOptions)


def test_request_options_alias() -> None:
    assert RequestOptions is DownstreamRestApiOptions


def test_each_instance_gets_its_own_default_token_options() -> None:
    assert DownstreamRestApiOptions().acquire_token_options is not DownstreamRestApiOptions().acquire_token_options


@pytest.mark.parametrize("value", [None, ""])
def test_http_method_rejects_missing_value_and_keeps_previous(value) -> None:
    options = DownstreamRestApiOptions(http_method=HttpMethod.PATCH)

    with pytest.raises(InvalidOptionError) as excinfo:
        options.http_method = value

    assert excinfo.value.option_name == "http_method"
    assert options.http_method is HttpMethod.PATCH


@pytest.mark.parametrize("method", ["MERGE", "propfind", "Report"])
def test_http_method_accepts_custom_verbs(method) -> None:
    options = DownstreamRestApiOptions()
    options.http_method = method
    assert options.http_method == method.upper()
    assert not isinstance(options.http_method, HttpMethod)
    assert str(options.http_method) == method.upper()


def test_http_method_connect_is_well_known() -> None:
    options = DownstreamRestApiOptions(http_method="connect")
    assert options.http_method is HttpMethod.CONNECT


@pytest.mark.parametrize("value", ["GET ME", "GE/T", 42])
def test_http_method_rejects_invalid_tokens(value) -> None:
    options = DownstreamRestApiOptions()
    with pytest.raises(InvalidOptionError):
        options.http_method = value
    assert options.http_method is HttpMethod.GET


def test_clone_keeps_custom_verb() -> None:
    options = DownstreamRestApiOptions(http_method="MERGE")
    assert options.clone().http_method == "MERGE"


def test_copy_of_rejects_unrelated_options() -> None:
    with pytest.raises(InvalidOptionError) as excinfo:
        DownstreamRestApiOptions.copy_of(DownstreamApiOptions(base_url="https://api.example.com"))
    assert excinfo.value.option_name == "other"


def test_http_method_accepts_strings_case_insensitively() -> None:
    options = DownstreamRestApiOptions()
    options.http_method = "delete"
    assert options.http_method is HttpMethod.DELETE
    assert options.http_method == "DELETE"


@pytest.mark.parametrize("value", [None, ""])
def test_protocol_scheme_rejects_empty_and_keeps_previous(value) -> None:
    options = DownstreamRestApiOptions(protocol_scheme="PoP")

    with pytest.raises(InvalidOptionError):
        options.protocol_scheme = value

    assert options.protocol_scheme == "PoP"


def test_invalid_values_fail_at_construction() -> None:
    with pytest.raises(InvalidOptionError):
        DownstreamRestApiOptions(protocol_scheme="")
    with pytest.raises(InvalidOptionError):
        DownstreamRestApiOptions(http_method=None)


def test_acquire_token_options_rejects_none() -> None:
    options = DownstreamRestApiOptions()
    original = options.acquire_token_options

    with pytest.raises(InvalidOptionError) as excinfo:
        options.acquire_token_options = None

    assert excinfo.value.option_name == "acquire_token_options"
    assert options.acquire_token_options is original


def test_acquire_token_options_rejects_other_types() -> None:
    options = DownstreamRestApiOptions()
    with pytest.raises(InvalidOptionError):
        options.acquire_token_options = {"tenant": "common"}


def test_invalid_option_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        DownstreamRestApiOptions().protocol_scheme = ""


def test_relative_path_none_becomes_empty() -> None:
    options = DownstreamRestApiOptions(base_url="https://api.example.com")
    options.relative_path = None
    assert options.relative_path == ""
    assert options.get_api_url() == "https://api.example.com/"


def test_get_api_url_trims_trailing_slash() -> None:
    options = DownstreamRestApiOptions(base_url="https://graph.microsoft.com/v1.0/", relative_path="me/profile")
    assert options.get_api_url() == "https://graph.microsoft.com/v1.0/me/profile"


def test_get_api_url_without_trailing_slash() -> None:
    options = DownstreamRestApiOptions(base_url="https://graph.microsoft.com/v1.0", relative_path="me/profile")
    assert options.get_api_url() == "https://graph.microsoft.com/v1.0/me/profile"


def test_get_api_url_trims_repeated_trailing_slashes() -> None:
    options = DownstreamRestApiOptions(base_url="https://graph.microsoft.com/v1.0///", relative_path="me")
    assert options.get_api_url() == "https://graph.microsoft.com/v1.0/me"


def test_get_api_url_passes_through_without_base_url() -> None:
    options = DownstreamRestApiOptions(relative_path="me/profile")
    assert options.get_api_url() == "/me/profile"


def test_get_api_url_does_not_normalize_relative_path() -> None:
    options = DownstreamRestApiOptions(base_url="https://mylibrary.com", relative_path="/books/all")
    assert options.get_api_url() == "https://mylibrary.com//books/all"


def test_clone_copies_every_field() -> None:
    source = _populated()
    clone = source.clone()

    assert clone is not source
    assert clone.base_url == source.base_url
    assert clone.relative_path == source.relative_path
    assert clone.http_method is HttpMethod.POST
    assert clone.protocol_scheme == "PoP"
    assert clone.accept_header == "application/xml"
    assert clone.content_type == "text/plain"
    assert clone.customize_request is source.customize_request
    assert clone.serializer is source.serializer
    assert clone.deserializer is source.deserializer
    assert clone.get_api_url() == source.get_api_url()


def test_clone_deep_copies_token_options() -> None:
    source = _populated()
    clone = source.clone()

    assert clone.acquire_token_options is not source.acquire_token_options
    assert clone.acquire_token_options == source.acquire_token_options

    clone.acquire_token_options.tenant = "fabrikam.onmicrosoft.com"
    clone.acquire_token_options.managed_identity.user_assigned_client_id = "other"

    assert source.acquire_token_options.tenant == "contoso.onmicrosoft.com"
    assert source.acquire_token_options.managed_identity.user_assigned_client_id == "mi-client"


def test_clone_shares_collections() -> None:
    source = _populated()
    clone = source.clone()

    assert clone.scopes is source.scopes
    assert clone.extra_header_parameters is source.extra_header_parameters
    assert clone.extra_query_parameters is source.extra_query_parameters

    clone.extra_header_parameters["X-Shared"] = "yes"
    assert source.extra_header_parameters["X-Shared"] == "yes"


def test_clone_override_with_new_container_leaves_source_untouched() -> None:
    source = _populated()
    clone = source.clone()

    clone.extra_header_parameters = {**clone.extra_header_parameters, "X-Override": "1"}
    clone.scopes = ["files.read"]
    clone.http_method = HttpMethod.GET

    assert "X-Override" not in source.extra_header_parameters
    assert source.scopes == ["user.read", "mail.read"]
    assert source.http_method is HttpMethod.POST


def test_copy_of_rejects_none() -> None:
    with pytest.raises(InvalidOptionError) as excinfo:
        DownstreamRestApiOptions.copy_of(None)
    assert excinfo.value.option_name == "other"


def test_copy_of_reproduces_source() -> None:
    source = _populated()
    copy = DownstreamRestApiOptions.copy_of(source)

    for name in (
        "base_url",
        "relative_path",
        "http_method",
        "protocol_scheme",
        "scopes",
        "extra_header_parameters",
        "extra_query_parameters",
        "customize_request",
        "serializer",
        "deserializer",
        "accept_header",
        "content_type",
    ):
        assert getattr(copy, name) == getattr(source, name), name
    assert copy.acquire_token_options == source.acquire_token_options
    assert copy.acquire_token_options is not source.acquire_token_options


def test_clone_of_subclass_keeps_subclass() -> None:
    source = _TracedRestApiOptions(base_url="https://api.example.com")
    as_base: DownstreamRestApiOptions = source

    clone = as_base.clone()

    assert type(clone) is _TracedRestApiOptions
    assert clone.base_url == "https://api.example.com"
