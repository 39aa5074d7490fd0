from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from ._core import Pipeable
from ._results import NoneOption, Option, Some

type Headers = dict[str, str]
"""HTTP headers as a name-to-value mapping."""

type OptionalRecord[T] = dict[str, Option[T]]
"""A record where each value is an `Option[T]`."""

type OptionalSomeRecord[T] = dict[str, Some[T]]
"""A record where each value is a `Some[T]`."""

type OptionalNoneRecord = dict[str, NoneOption]
"""A record where each value is `NONE`."""


@dataclass(frozen=True, slots=True)
class Request(Pipeable):
    """Describes an HTTP request issued by `fetch_with_option`.

    Requests compare by value but are not hashable, since `headers` is a plain dict.

    Example:
    ```python
    >>> import optionkit as ox
    >>> ox.Request.from_mapping({"url": "https://example.com", "headers": {}})
    Request(url='https://example.com', headers={}, method='GET', body=None)

    ```
    """

    __hash__ = None  # type: ignore[assignment]

    url: str
    """The URL of the request."""
    headers: Headers = field(default_factory=dict)
    """The caller headers, merged over the default ones."""
    method: str = "GET"
    """The HTTP method of the request."""
    body: str | None = None
    """The raw body of the request."""

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Request:
        """Build a `Request` from a `{url, headers, method?, body?}` mapping.

        Missing optional keys, or keys set to `None`, fall back to the defaults.
        """
        return cls(
            url=data["url"],
            headers=dict(data.get("headers") or {}),
            method=data.get("method") or "GET",
            body=data.get("body"),
        )
