"""Tests for wren.errors — exception hierarchy and error messages."""

import pytest

from wren.errors import (
    ConfigurationError,
    DuplicatePaginateCall,
    HTTPError,
    InvalidRoute,
    NotFound,
    RouteGenerationError,
    UpstreamComponentError,
    WrenError,
)


class TestHierarchy:
    @pytest.mark.parametrize(
        "cls",
        [
            ConfigurationError,
            InvalidRoute,
            RouteGenerationError,
            HTTPError,
            DuplicatePaginateCall,
            UpstreamComponentError,
        ],
    )
    def test_is_wren_error(self, cls: type) -> None:
        assert issubclass(cls, WrenError)

    def test_not_found_is_http_error(self) -> None:
        assert issubclass(NotFound, HTTPError)

    def test_route_generation_error_is_value_error(self) -> None:
        assert issubclass(RouteGenerationError, ValueError)


class TestHTTPError:
    def test_str_with_detail(self) -> None:
        assert str(HTTPError(status=400, detail="Bad path")) == "400: Bad path"

    def test_str_without_detail(self) -> None:
        assert str(HTTPError(status=500)) == "500"

    def test_frozen(self) -> None:
        err = HTTPError(status=400)
        with pytest.raises(AttributeError):
            err.status = 500  # type: ignore[misc]


class TestNotFound:
    def test_defaults(self) -> None:
        err = NotFound()
        assert err.status == 404
        assert err.detail == "Not Found"

    def test_custom_detail(self) -> None:
        assert NotFound("No route matches '/x'").detail == "No route matches '/x'"


class TestInvalidRoute:
    def test_carries_file_and_reason(self) -> None:
        err = InvalidRoute("src/pages/[a][b].astro", "parameters must be separated")
        assert err.file == "src/pages/[a][b].astro"
        assert err.reason == "parameters must be separated"
        assert "src/pages/[a][b].astro" in str(err)
        assert "parameters must be separated" in str(err)


class TestComponentErrors:
    def test_duplicate_paginate_names_component(self) -> None:
        assert "blog/[...page].astro" in str(DuplicatePaginateCall("blog/[...page].astro"))
        assert "paginate()" in str(DuplicatePaginateCall())

    def test_upstream_error(self) -> None:
        err = UpstreamComponentError("src/pages/blog/[slug].astro", "boom")
        assert err.component == "src/pages/blog/[slug].astro"
        assert str(err) == "getStaticPaths failed for src/pages/blog/[slug].astro: boom"
