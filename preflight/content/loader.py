"""
Content Loader

Reads articles, books and chapters from a content directory laid out as:

    articles/<slug>.md
    books/<slug>/config.yaml
    books/<slug>/cover.png | cover.jpg
    books/<slug>/<position>.md

Markdown files carry their fields as YAML front matter between two
``---`` lines. Loading problems raise ContentLoadError; rule violations
are left to the validation engine.
"""

import base64
import logging
import re
from pathlib import Path
from typing import Any, Dict, Iterator, Optional, Tuple, Union

import yaml
from pydantic import ValidationError

from preflight.errors import ContentLoadError
from preflight.items import Article, Book, Chapter, Item, ItemKind


logger = logging.getLogger(__name__)

FRONT_MATTER_PATTERN = re.compile(r"\A---[ \t]*\r?\n(.*?)^---[ \t]*\r?$", re.DOTALL | re.MULTILINE)

BOOK_CONFIG_NAMES = ("config.yaml", "config.yml")

COVER_IMAGES = {
    "cover.png": "image/png",
    "cover.jpg": "image/jpeg",
}


def parse_front_matter(text: str, file_path: Optional[str] = None) -> Dict[str, Any]:
    """Extract the YAML front matter of a markdown document.

    Args:
        text: Full document text.
        file_path: Used in error messages only.

    Returns:
        Front matter fields, or an empty dict if the document has none.

    Raises:
        ContentLoadError: If the front matter is not a YAML mapping.
    """
    match = FRONT_MATTER_PATTERN.match(text.lstrip("\ufeff"))
    if not match:
        return {}
    return _parse_yaml_mapping(match.group(1), file_path)


def load_article(path: Union[str, Path]) -> Article:
    """Load an article; its slug is the file name without extension."""
    path = Path(path)
    fields = parse_front_matter(_read_text(path), str(path))
    fields["slug"] = path.stem
    return _build(Article, fields, path)


def load_chapter(path: Union[str, Path]) -> Chapter:
    """Load a chapter; its position is the file name up to the first dot."""
    path = Path(path)
    fields = parse_front_matter(_read_text(path), str(path))
    fields["position"] = path.name.split(".", 1)[0]
    return _build(Chapter, fields, path)


def load_book(book_dir: Union[str, Path]) -> Book:
    """Load a book from its directory.

    The slug is the directory name. Fields come from config.yaml (or
    config.yml); a cover.png or cover.jpg is embedded as a data URL.
    """
    book_dir = Path(book_dir)
    if not book_dir.is_dir():
        raise ContentLoadError(f"Book directory not found: {book_dir}", str(book_dir))

    fields: Dict[str, Any] = {}
    for name in BOOK_CONFIG_NAMES:
        config_path = book_dir / name
        if config_path.is_file():
            fields = _parse_yaml_mapping(_read_text(config_path), str(config_path))
            break
    else:
        logger.debug(f"No config.yaml found in {book_dir}")

    fields["slug"] = book_dir.name
    cover = _read_cover(book_dir)
    if cover:
        fields["coverDataUrl"] = cover
    return _build(Book, fields, book_dir)


def load_item(path: Union[str, Path], kind: ItemKind) -> Item:
    """Load an item of the given kind from a file or book directory."""
    loaders = {
        ItemKind.ARTICLE: load_article,
        ItemKind.BOOK: load_book,
        ItemKind.CHAPTER: load_chapter,
    }
    return loaders[ItemKind(kind)](path)


def infer_kind(path: Union[str, Path]) -> Optional[ItemKind]:
    """Guess the item kind from where a path sits in the content layout."""
    path = Path(path)
    if path.is_dir():
        return ItemKind.BOOK
    if path.suffix != ".md":
        return None
    if path.parent.name == "articles":
        return ItemKind.ARTICLE
    if path.parent.parent.name == "books":
        return ItemKind.CHAPTER
    return None


def discover(content_dir: Union[str, Path]) -> Iterator[Tuple[ItemKind, Path]]:
    """Yield (kind, path) for every item under a content directory, in sorted order."""
    content_dir = Path(content_dir)

    articles_dir = content_dir / "articles"
    if articles_dir.is_dir():
        for path in sorted(articles_dir.glob("*.md")):
            yield ItemKind.ARTICLE, path

    books_dir = content_dir / "books"
    if books_dir.is_dir():
        for book_dir in sorted(p for p in books_dir.iterdir() if p.is_dir()):
            yield ItemKind.BOOK, book_dir
            for path in sorted(book_dir.glob("*.md")):
                yield ItemKind.CHAPTER, path


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ContentLoadError(f"File not found: {path}", str(path), e)
    except (OSError, UnicodeDecodeError) as e:
        raise ContentLoadError(f"Cannot read file: {e}", str(path), e)


def _read_cover(book_dir: Path) -> Optional[str]:
    for name, mime_type in COVER_IMAGES.items():
        cover_path = book_dir / name
        if cover_path.is_file():
            try:
                data = cover_path.read_bytes()
            except OSError as e:
                raise ContentLoadError(f"Cannot read cover image: {e}", str(cover_path), e)
            encoded = base64.b64encode(data).decode("ascii")
            return f"data:{mime_type};base64,{encoded}"
    return None


def _parse_yaml_mapping(text: str, file_path: Optional[str]) -> Dict[str, Any]:
    try:
        content = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ContentLoadError(f"Invalid YAML: {e}", file_path, e)

    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ContentLoadError("Front matter must be a YAML mapping", file_path)
    return content


def _build(model, fields: Dict[str, Any], path: Path):
    try:
        return model(**fields)
    except ValidationError as e:
        raise ContentLoadError(
            f"Invalid {model.kind.value} fields: {e.error_count()} error(s): "
            + "; ".join(
                f"{'.'.join(str(loc) for loc in err['loc']) or 'root'}: {err['msg']}"
                for err in e.errors()
            ),
            str(path),
            e,
        )
    except TypeError as e:
        # Non-string YAML keys cannot be passed as keyword arguments
        raise ContentLoadError(f"Invalid front matter keys: {e}", str(path), e)
