"""Immutable request parameters — query string plus URL-encoded form body.

Implements ``Mapping[str, str]`` and the ``MultiValueMapping`` protocol.
The transport layer builds one ``RequestParams`` per request; the core
only reads it.
"""

from collections.abc import Iterator, Mapping
from urllib.parse import parse_qs

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def parse_query(query_string: bytes) -> dict[str, list[str]]:
    """Parse a raw query string into field name -> list of values."""
    return parse_qs(query_string.decode("latin-1"), keep_blank_values=True)


def parse_form(body: bytes, content_type: str | None) -> dict[str, list[str]]:
    """Parse a URL-encoded form body.

    Bodies with any other content type carry no parameters and parse to
    an empty mapping. Multipart uploads are not supported.
    """
    if not body or content_type is None:
        return {}
    if content_type.lower().split(";")[0].strip() != FORM_CONTENT_TYPE:
        return {}
    return parse_qs(body.decode("utf-8", errors="replace"), keep_blank_values=True)


class RequestParams(Mapping[str, str]):
    """Read-only view over query and form parameters.

    ``__getitem__`` returns the first value for a key (query values
    come before form values). ``get_list`` returns all values.
    """

    _data: dict[str, list[str]]

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, list[str]] | None = None) -> None:
        object.__setattr__(self, "_data", {k: list(v) for k, v in (data or {}).items()})

    @classmethod
    def from_sources(
        cls,
        query_string: bytes = b"",
        body: bytes = b"",
        content_type: str | None = None,
    ) -> RequestParams:
        """Merge the query string and form body into one parameter set."""
        merged = parse_query(query_string)
        for key, values in parse_form(body, content_type).items():
            merged.setdefault(key, []).extend(values)
        return cls(merged)

    def __getitem__(self, key: str) -> str:
        return self._data[key][0]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {self[k]!r}" for k in self)
        return f"RequestParams({{{items}}})"

    def get(self, key: str, default: str | None = None) -> str | None:  # type: ignore[override]
        """Return the first value for *key*, or *default* if missing."""
        values = self._data.get(key)
        if values:
            return values[0]
        return default

    def get_list(self, key: str) -> list[str]:
        """Return all values for *key* (repeated fields, multi-selects)."""
        return list(self._data.get(key, []))
