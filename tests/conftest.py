"""
Pytest configuration and fixtures for test isolation.
"""
import os
import textwrap

import pytest

from preflight.items import Article, Book, Chapter
from preflight.utils.logging_config import logging_config


@pytest.fixture(autouse=True, scope="function")
def reset_environment():
    """Reset environment variables between tests."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers installed by configure_logging() so each test starts clean."""
    logging_config.reset()
    yield
    logging_config.reset()


@pytest.fixture
def valid_article():
    return Article(
        slug="python-packaging-notes",
        title="Notes on Python packaging",
        type="tech",
        emoji="📦",
        topics=["python", "packaging"],
    )


@pytest.fixture
def valid_book():
    return Book(
        slug="practical-asyncio-book",
        title="Practical asyncio",
        summary="Writing concurrent services with asyncio.",
        price=500,
        topics=["python", "asyncio"],
        coverDataUrl="data:image/png;base64,iVBORw0KGgo=",
    )


@pytest.fixture
def valid_chapter():
    return Chapter(position="1", title="Introduction")


@pytest.fixture
def write_file():
    """Write dedented text to a path, creating parent directories."""
    def _write(path, text):
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(text).lstrip(), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def content_dir(tmp_path, write_file):
    """A content directory holding one valid article, one valid book and its chapters."""
    root = tmp_path / "site"
    write_file(root / "articles" / "python-packaging-notes.md", """
        ---
        title: "Notes on Python packaging"
        emoji: "📦"
        type: "tech"
        topics: ["python", "packaging"]
        published: true
        ---

        Body text.
    """)
    book_dir = root / "books" / "practical-asyncio-book"
    write_file(book_dir / "config.yaml", """
        title: "Practical asyncio"
        summary: "Writing concurrent services with asyncio."
        topics: ["python", "asyncio"]
        published: true
        price: 500
    """)
    (book_dir / "cover.png").write_bytes(b"\x89PNG\r\n\x1a\n")
    write_file(book_dir / "1.md", """
        ---
        title: "Introduction"
        ---

        Chapter one.
    """)
    write_file(book_dir / "2.md", """
        ---
        title: "Event loops"
        ---

        Chapter two.
    """)
    return root
