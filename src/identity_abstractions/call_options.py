"""Validated fields and clone machinery shared by both option families."""

from __future__ import annotations

from typing import Any, Callable, TypeVar

import httpx

from .acquire_token_options import AcquireTokenOptions
from .enums import HttpMethod
from .exceptions import InvalidOptionError
from .validation import coerce_http_method, require_acquire_token_options, require_protocol_scheme

_CallOptionsT = TypeVar("_CallOptionsT", bound="CallOptionsBase")


class CallOptionsBase:
    """
    Target and authorization settings of a downstream API call.

    ``http_method``, ``protocol_scheme`` and ``acquire_token_options`` are
    validated on every assignment and raise ``InvalidOptionError`` instead of
    storing a bad value.

    Copies are made with ``copy_of`` (or ``clone``): ``acquire_token_options``
    is cloned, every other field is copied by reference. Subclasses that add
    fields extend ``_copy_from`` and name the root of their family in
    ``_copy_source_type`` so that unrelated sources are rejected.
    """

    def __init__(
            self,
            *,
            base_url: str | None = None,
            relative_path: str = "",
            http_method: HttpMethod | str = HttpMethod.GET,
            protocol_scheme: str = "Bearer",
            acquire_token_options: AcquireTokenOptions | None = None,
            customize_request: Callable[[httpx.Request], None] | None = None,
    ):
        self.base_url = base_url
        self.relative_path = relative_path
        self.http_method = http_method
        self.protocol_scheme = protocol_scheme
        self.acquire_token_options = (
            acquire_token_options if acquire_token_options is not None else AcquireTokenOptions()
        )
        self.customize_request = customize_request

    @property
    def relative_path(self) -> str:
        return self._relative_path

    @relative_path.setter
    def relative_path(self, value: str | None) -> None:
        self._relative_path = value if value is not None else ""

    @property
    def http_method(self) -> HttpMethod | str:
        return self._http_method

    @http_method.setter
    def http_method(self, value: HttpMethod | str) -> None:
        self._http_method = coerce_http_method(value)

    @property
    def protocol_scheme(self) -> str:
        return self._protocol_scheme

    @protocol_scheme.setter
    def protocol_scheme(self, value: str) -> None:
        self._protocol_scheme = require_protocol_scheme(value)

    @property
    def acquire_token_options(self) -> AcquireTokenOptions:
        return self._acquire_token_options

    @acquire_token_options.setter
    def acquire_token_options(self, value: AcquireTokenOptions) -> None:
        self._acquire_token_options = require_acquire_token_options(value)

    @classmethod
    def _copy_source_type(cls) -> type:
        return CallOptionsBase

    @classmethod
    def copy_of(cls: type[_CallOptionsT], other: Any) -> _CallOptionsT:
        """Build a new instance of ``cls`` holding the values of ``other``."""
        if other is None:
            raise InvalidOptionError("cannot copy options from None", option_name="other")
        source_type = cls._copy_source_type()
        if not isinstance(other, source_type):
            raise InvalidOptionError(
                f"cannot copy {cls.__name__} from {type(other).__name__}, expected {source_type.__name__}",
                option_name="other",
            )
        options = cls()
        options._copy_from(other)
        return options

    def _copy_from(self, other: "CallOptionsBase") -> None:
        self.base_url = other.base_url
        self.relative_path = other.relative_path
        self.http_method = other.http_method
        self.protocol_scheme = other.protocol_scheme
        self.acquire_token_options = other.acquire_token_options.clone()
        self.customize_request = other.customize_request

    def _clone_internal(self) -> "CallOptionsBase":
        return type(self).copy_of(self)

    def clone(self: _CallOptionsT) -> _CallOptionsT:
        """Clone the options so that a caller can override some of them."""
        return self._clone_internal()  # type: ignore[return-value]

    def get_api_url(self) -> str:
        """Return the downstream API URL.

        The URL is not validated: an unset ``base_url`` yields "/" followed
        by the relative path.
        """
        return (self.base_url or "").rstrip("/") + f"/{self.relative_path}"

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(base_url={self.base_url!r}, relative_path={self.relative_path!r}, "
            f"http_method={str(self.http_method)!r}, protocol_scheme={self.protocol_scheme!r})"
        )
