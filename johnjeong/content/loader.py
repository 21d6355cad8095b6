"""Filesystem content discovery.

Locates the ``part-of-my-brain`` content root, parses markdown front-matter,
and assembles the ``AppData`` handed to the interactive core. Missing or
unreadable content degrades to empty tabs; nothing here raises for bad input.
"""

from __future__ import annotations

import logging
import os
import re
import string
from collections.abc import Mapping
from pathlib import Path

from .model import (
    ABOUT_LINKS,
    ABOUT_TAGLINE,
    AboutTab,
    AppData,
    Entry,
    Header,
    ListingTab,
)

logger = logging.getLogger(__name__)

CONTENT_DIR_ENV = "JOHNJEONG_CONTENT_DIR"
TITLE_ENV = "JOHNJEONG_TITLE"
SUBTITLE_ENV = "JOHNJEONG_SUBTITLE"
CONTENT_DIR_NAME = "part-of-my-brain"
HEADER_COMPONENT = Path("src") / "components" / "Header.astro"
PARENT_SEARCH_DEPTH = 6
SITE_URL = "https://johnjeong.com"
IMAGE_SUFFIXES = frozenset({".jpg", ".jpeg", ".png", ".webp"})

DEFAULT_TITLE = "John Jeong"
DEFAULT_SUBTITLE = "Co-founder & Co-CEO at Hyprnote"
CONTENT_NOT_FOUND_STATUS = (
    f"Content directory not found. Set {CONTENT_DIR_ENV} to your {CONTENT_DIR_NAME} path."
)

_HTML_TAG_RE = re.compile(r"<[^>]*>?")

# (directory, tab name, description, published-only)
LISTING_SOURCES: tuple[tuple[str, str, str, bool], ...] = (
    ("essays", "Essays", "Long-form writing.", True),
    ("journals", "Daily Logs", "Daily notes and logs.", False),
    ("inspirations", "Inspirations", "Talks, podcasts, and ideas that shaped me.", False),
    ("lessons", "Lessons", "Learning notes and highlights.", False),
)
GALLERY_SOURCE = ("gallery", "Gallery", "Photos I took.")


def _search_upwards(start: Path, relative: Path, *, want_dir: bool) -> Path | None:
    """Look for ``relative`` in ``start`` and its parents, nearest first."""
    current = start
    for _ in range(PARENT_SEARCH_DEPTH):
        candidate = current / relative
        if (want_dir and candidate.is_dir()) or (not want_dir and candidate.is_file()):
            return candidate
        if current.parent == current:
            break
        current = current.parent
    return None


def resolve_content_root(
    env: Mapping[str, str] | None = None,
    cwd: Path | None = None,
    configured: str | None = None,
) -> Path | None:
    """Return the content root directory, or ``None`` when none is found.

    Precedence: ``JOHNJEONG_CONTENT_DIR``, then the configured ``content_dir``,
    then a ``part-of-my-brain`` directory in ``cwd`` or one of its parents.
    Overrides pointing at something that is not a directory are ignored.
    """
    env = os.environ if env is None else env
    for override in (env.get(CONTENT_DIR_ENV), configured):
        if override:
            candidate = Path(override).expanduser()
            if candidate.is_dir():
                return candidate
            logger.warning("ignoring content directory override %s: not a directory", candidate)
    try:
        start = Path.cwd() if cwd is None else cwd
    except OSError:
        return None
    return _search_upwards(start, Path(CONTENT_DIR_NAME), want_dir=True)


def extract_quoted_value(contents: str, marker: str) -> str | None:
    """Return the first quoted string that follows ``marker`` in ``contents``."""
    index = contents.find(marker)
    if index < 0:
        return None
    rest = contents[index + len(marker):]
    quote_positions = [pos for pos in (rest.find('"'), rest.find("'")) if pos >= 0]
    if not quote_positions:
        return None
    quote_pos = min(quote_positions)
    quote_char = rest[quote_pos]
    end = rest.find(quote_char, quote_pos + 1)
    if end < 0:
        return None
    return rest[quote_pos + 1:end].strip()


def strip_html_tags(text: str) -> str:
    """Remove HTML tags and collapse whitespace runs into single spaces."""
    return " ".join(_HTML_TAG_RE.sub("", text).split())


def load_header(env: Mapping[str, str] | None = None, cwd: Path | None = None) -> Header:
    """Build header text from defaults, env overrides, then ``Header.astro``."""
    env = os.environ if env is None else env
    title = env.get(TITLE_ENV, DEFAULT_TITLE)
    subtitle = env.get(SUBTITLE_ENV, DEFAULT_SUBTITLE)

    try:
        start = Path.cwd() if cwd is None else cwd
    except OSError:
        return Header(title=title, subtitle=subtitle)
    header_path = _search_upwards(start, HEADER_COMPONENT, want_dir=False)
    if header_path is not None:
        try:
            contents = header_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("could not read %s: %s", header_path, exc)
        else:
            value = extract_quoted_value(contents, "title =")
            if value is not None:
                title = value
            value = extract_quoted_value(contents, "subtitle =")
            if value is not None:
                subtitle = strip_html_tags(value)
    return Header(title=title, subtitle=subtitle)


def _clean_frontmatter_value(value: str) -> str:
    trimmed = value.strip()
    if len(trimmed) >= 2 and trimmed[0] == trimmed[-1] and trimmed[0] in {'"', "'"}:
        return trimmed[1:-1]
    return trimmed


def split_frontmatter(contents: str) -> tuple[dict[str, str], str]:
    """Split a leading ``---`` block of ``key: value`` lines from the body.

    Returns an empty mapping and the untouched text when no block is present.
    An unterminated block consumes the rest of the file.
    """
    lines = contents.splitlines(keepends=True)
    if not lines or lines[0].rstrip("\r\n") != "---":
        return {}, contents

    values: dict[str, str] = {}
    offset = len(lines[0])
    for line in lines[1:]:
        offset += len(line)
        stripped = line.rstrip("\r\n")
        if stripped == "---":
            break
        key, sep, value = stripped.partition(":")
        if sep:
            values[key.strip()] = _clean_frontmatter_value(value)
    return values, contents[offset:]


def title_from_slug(slug: str) -> str:
    """Turn ``my-first_post`` into ``My First Post``."""
    words = slug.replace("-", " ").replace("_", " ").split()
    return " ".join(word[:1].upper() + word[1:] for word in words)


def date_from_slug(slug: str) -> str | None:
    """Return a date for slugs made only of digits and separators, like ``2024_01_05``."""
    if len(slug) >= 10 and all(ch in string.digits or ch in "-_" for ch in slug):
        return slug.replace("_", "-")
    return None


def _read_markdown(path: Path) -> str | None:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("skipping unreadable post %s: %s", path, exc)
        return None


def load_posts(directory: Path, base_url: str, published_only: bool) -> list[Entry]:
    """Load ``*.md`` posts from ``directory`` sorted newest-first.

    ``published_only`` drops posts whose ``published`` front-matter key is
    present and not ``true``. Posts without that key are kept.
    """
    if not directory.is_dir():
        return []

    base = base_url.rstrip("/")
    posts: list[Entry] = []
    for path in directory.iterdir():
        if path.suffix != ".md" or not path.is_file():
            continue
        contents = _read_markdown(path)
        if contents is None:
            continue
        frontmatter, body = split_frontmatter(contents)

        if published_only:
            published = frontmatter.get("published")
            if published is not None and published.lower() != "true":
                continue

        slug = path.stem or "post"
        date = frontmatter.get("created_at") or date_from_slug(slug)
        title = frontmatter.get("title") or title_from_slug(slug)
        description = frontmatter.get("description", "")
        body_text = body.strip()
        if not body_text and description:
            body_text = description

        posts.append(
            Entry(
                title=title,
                date=date or "",
                body=body_text,
                url=f"{base}/{slug}",
                sort_key=date or slug,
            )
        )

    posts.sort(key=lambda entry: entry.sort_key, reverse=True)
    return posts


def _gallery_sort_key(path: Path) -> str:
    try:
        modified = path.stat().st_mtime
    except OSError:
        return path.stem
    if modified < 0:
        return path.stem
    return f"{int(modified):020d}"


def load_gallery(directory: Path) -> list[Entry]:
    """Load image files as entries ordered by most recent modification."""
    if not directory.is_dir():
        return []

    images: list[Entry] = []
    for path in directory.iterdir():
        if path.suffix.lower() not in IMAGE_SUFFIXES or not path.is_file():
            continue
        stem = path.stem or "image"
        images.append(
            Entry(
                title=stem,
                date="",
                body=f"Image file: {path}",
                url=str(path),
                sort_key=_gallery_sort_key(path),
            )
        )

    images.sort(key=lambda entry: entry.sort_key, reverse=True)
    return images


def _load_section(loader, *args) -> list[Entry]:
    try:
        return loader(*args)
    except OSError as exc:
        logger.warning("could not list %s: %s", args[0], exc)
        return []


def build_app_data(
    env: Mapping[str, str] | None = None,
    cwd: Path | None = None,
    configured_content_dir: str | None = None,
) -> tuple[AppData, str | None]:
    """Assemble every tab in display order plus an optional startup status."""
    header = load_header(env, cwd)
    content_root = resolve_content_root(env, cwd, configured_content_dir)
    status: str | None = None
    if content_root is None:
        logger.warning("content directory not found; listing tabs will be empty")
        status = CONTENT_NOT_FOUND_STATUS

    tabs: list = [AboutTab(tagline=ABOUT_TAGLINE, links=ABOUT_LINKS)]
    for dirname, name, description, published_only in LISTING_SOURCES:
        entries: list[Entry] = []
        if content_root is not None:
            entries = _load_section(
                load_posts,
                content_root / dirname,
                f"{SITE_URL}/{dirname}",
                published_only,
            )
        tabs.append(ListingTab.sorted(name, description, entries))

    gallery_dir, gallery_name, gallery_description = GALLERY_SOURCE
    gallery: list[Entry] = []
    if content_root is not None:
        gallery = _load_section(load_gallery, content_root / gallery_dir)
    tabs.append(ListingTab.sorted(gallery_name, gallery_description, gallery))

    logger.debug(
        "loaded content from %s: %s",
        content_root,
        ", ".join(f"{tab.name}={len(tab.entries)}" for tab in tabs[1:]),
    )
    return AppData(header=header, tabs=tuple(tabs)), status
