"""
Base classes for server-built forms.

A form describes its fields as a tree of ``FormElement`` descriptors.  The
request it is built for is passed in explicitly as a ``RequestContext``;
forms never read a global request object.
"""

from __future__ import annotations

import abc
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping
from urllib.parse import urlencode

from fastapi import Request

from api.models import FormElement


@dataclass(frozen=True)
class RequestContext:
    """The parts of an incoming request a form may read while building."""

    path: str = "/"
    query: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "query", MappingProxyType(dict(self.query)))

    @classmethod
    def from_request(cls, request: Request) -> RequestContext:
        # QueryParams.get() returns the last value for repeated keys.
        params = request.query_params
        return cls(
            path=request.url.path,
            query={key: params.get(key) for key in params.keys()},
        )

    @property
    def url(self) -> str:
        """Path plus the query string, suitable for a redirect target."""
        if not self.query:
            return self.path
        return f"{self.path}?{urlencode(list(self.query.items()))}"


@dataclass
class FormState:
    """Submitted values plus the validate/submit pipeline's outcome."""

    values: dict[str, Any] = field(default_factory=dict)
    errors: dict[str, str] = field(default_factory=dict)
    redirect: str | None = None

    def set_error(self, name: str, message: str) -> None:
        self.errors[name] = message

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)


class FormBase(abc.ABC):
    """A form that can be built for a request and submitted."""

    @abc.abstractmethod
    def identify(self) -> str:
        """Return the stable id used to route and cache this form."""

    @abc.abstractmethod
    def build(self, context: RequestContext) -> dict[str, FormElement]:
        """Return the form's element tree for *context*."""

    def validate(self, state: FormState) -> None:
        """Record problems on *state*; forms without validation keep this."""

    @abc.abstractmethod
    def submit(self, state: FormState) -> None:
        """Act on a validated submission."""
