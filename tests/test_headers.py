"""Tests for perch.http.headers — case-insensitive request headers."""

import pytest

from perch.http.headers import Headers


def _headers() -> Headers:
    return Headers(
        (
            (b"Content-Type", b"text/plain"),
            (b"accept", b"text/html"),
            (b"Accept", b"application/json"),
        )
    )


class TestHeaders:
    def test_case_insensitive_lookup(self) -> None:
        h = _headers()
        assert h["content-type"] == "text/plain"
        assert h["CONTENT-TYPE"] == "text/plain"

    def test_first_value_wins(self) -> None:
        assert _headers()["accept"] == "text/html"

    def test_get_list(self) -> None:
        assert _headers().get_list("accept") == ["text/html", "application/json"]

    def test_missing(self) -> None:
        h = _headers()
        assert h.get("x-missing") is None
        assert h.get("x-missing", "d") == "d"
        with pytest.raises(KeyError):
            h["x-missing"]

    def test_contains(self) -> None:
        h = _headers()
        assert "Accept" in h
        assert "x-missing" not in h
        assert 42 not in h

    def test_iter_dedupes_lowercase_names(self) -> None:
        h = _headers()
        assert list(h) == ["content-type", "accept"]
        assert len(h) == 2

    def test_is_multi_value_mapping(self) -> None:
        from perch._internal.multimap import MultiValueMapping

        assert isinstance(_headers(), MultiValueMapping)
