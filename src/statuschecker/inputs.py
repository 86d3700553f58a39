# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""URL list loading."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from .errors import ConfigurationError


def parse_url_lines(lines: Iterable[str]) -> list[str]:
    """Strip each line, skipping blanks and `#` comments. Order and duplicates are kept."""
    urls: list[str] = []
    for line in lines:
        trimmed = line.strip()
        if trimmed and not trimmed.startswith("#"):
            urls.append(trimmed)
    return urls


def load_urls(file_path: str | Path | None = None, urls: Iterable[str] = ()) -> list[str]:
    """
    Collect URLs from an optional file followed by inline arguments.

    Raises ConfigurationError when the file cannot be read or nothing is left.
    """
    collected: list[str] = []
    if file_path is not None:
        path = Path(file_path)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigurationError(f"Failed to open file {path}: {exc}") from exc
        collected.extend(parse_url_lines(text.splitlines()))
    collected.extend(parse_url_lines(urls))

    if not collected:
        raise ConfigurationError("No valid URLs provided.")
    return collected
