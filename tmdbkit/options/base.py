"""Request builder protocol.

A builder is created per call site by an endpoint group, collects optional
parameters through chained setters, and performs exactly one request per
`execute()` call.

Lifecycle:
- Setters only mutate the builder's option record and return the builder.
- `execute()` validates, encodes the options, and delegates to
  `TmdbClient.execute`. Errors propagate untouched.
- Builders are not single-use: calling `execute()` again sends a second,
  independent request with the same options.

Non-responsibilities
- No retries, no caching, no thread-safety for concurrent mutation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Generic, TypeVar

from pydantic import BaseModel

from tmdbkit.client.params import OptionRecord, encode_params

if TYPE_CHECKING:
    from tmdbkit.client.client import TmdbClient

T = TypeVar("T", bound=BaseModel)


class NoOptions(OptionRecord):
    pass


class RequestBuilder(Generic[T]):
    """Shared execution path for every builder.

    Subclasses set `options` to their own record and override the
    `_validate`, `_params` or `_finalize` hooks when they need to.
    """

    def __init__(
        self,
        client: "TmdbClient",
        method: str,
        path: str,
        response_model: type[T],
        body: BaseModel | dict[str, Any] | None = None,
        options: OptionRecord | None = None,
    ):
        self.client = client
        self.method = method
        self.path = path
        self.response_model = response_model
        self.body = body
        self.options = options if options is not None else NoOptions()

    def _validate(self) -> None:
        """Raises ValidationError when the builder cannot be executed."""

    def _params(self) -> dict[str, str]:
        return encode_params(self.options)

    def _finalize(self, result: T) -> T:
        return result

    def execute(self) -> T:
        """Performs the request and returns the decoded response."""
        self._validate()
        params = self._params()
        result = self.client.execute(
            self.method,
            self.path,
            params=params,
            body=self.body,
            response_model=self.response_model,
        )
        return self._finalize(result)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(method={self.method!r}, path={self.path!r})"
