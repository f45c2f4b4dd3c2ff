"""Shared fixtures: a validated template engine and a small library app."""

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

import pytest

from perch.app import App
from perch.config import AppConfig
from perch.errors import ParameterError, TranslationError
from perch.templating.engine import TemplateEngine
from perch.templating.integration import create_engine

BOOK_TEMPLATE = "<article><h2>{{ title }}</h2><p>{{ author }}</p></article>"


@dataclass(frozen=True, slots=True)
class Book:
    isbn: str
    title: str
    author: str


BOOKS = {
    "9780141439518": Book("9780141439518", "Pride and Prejudice", "Jane Austen"),
    "9780486284736": Book("9780486284736", "Moby Dick", "Herman Melville"),
}


class BookTranslator:
    """Look a book up by its ``isbn`` capture."""

    def convert(self, captures: Mapping[str, str]) -> Book:
        isbn = captures.get("isbn")
        if not isbn:
            raise ParameterError("missing isbn")
        if isbn == "offline":
            raise TranslationError("catalogue unavailable")
        try:
            return BOOKS[isbn]
        except KeyError:
            raise ParameterError(f"unknown isbn {isbn}") from None


@pytest.fixture
def config(tmp_path: Path) -> AppConfig:
    return AppConfig(title="Library", template_dir=tmp_path / "templates")


@pytest.fixture
def engine(config: AppConfig) -> TemplateEngine:
    return create_engine(config, {"book.html": BOOK_TEMPLATE})


@pytest.fixture
def library(config: AppConfig) -> App:
    app = App(config)
    app.add_template("book.html", BOOK_TEMPLATE)
    app.add_static("", "Index", b"<p>Welcome to the library</p>")
    app.add_translator("books/:isbn", "Book", "book.html", BookTranslator())
    app.add_json("api/books/:isbn", BookTranslator())
    return app
