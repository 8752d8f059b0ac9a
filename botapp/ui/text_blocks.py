"""Reusable helpers for composing Markdown messages."""

from __future__ import annotations

from typing import Iterable, List, Optional

from telegram.helpers import escape_markdown


def escape_telegram_markdown(text: object, *, escape_special_chars: bool = False) -> str:
    """
    Escape text for Telegram Markdown.

    Args:
        text: Text to escape
        escape_special_chars: If True, escape for MarkdownV2 (hyphens, periods...).
                            Default False uses legacy Markdown escaping.

    Returns:
        Escaped markdown string safe for Telegram
    """
    version = 2 if escape_special_chars else 1
    return escape_markdown(str(text), version=version)


def bold_telegram_text(text: object, *, escape_special_chars: bool = False) -> str:
    return f"*{escape_telegram_markdown(text, escape_special_chars=escape_special_chars)}*"


def format_price(amount: Optional[float]) -> str:
    """Render a lira amount without trailing ``.0``: ``1500 ₺``, ``750.5 ₺``."""
    if amount is None:
        return "-"
    value = float(amount)
    text = f"{value:.0f}" if value.is_integer() else f"{value:.2f}".rstrip('0')
    return f"{text} ₺"


def format_time_range(start: str, end: str) -> str:
    return f"{start}-{end}"


class MarkdownBlockBuilder:
    """Utility for building Markdown messages with bullet support."""

    __slots__ = ("_lines",)

    def __init__(self) -> None:
        self._lines: List[str] = []

    def line(self, text: str = "") -> "MarkdownBlockBuilder":
        self._lines.append(text)
        return self

    def heading(self, text: str) -> "MarkdownBlockBuilder":
        if text:
            self._lines.append(text)
        return self

    def bullet(self, text: str) -> "MarkdownBlockBuilder":
        if text:
            self._lines.append(f"• {text}")
        return self

    def bullets(self, items: Iterable[str]) -> "MarkdownBlockBuilder":
        for item in items:
            if item:
                self._lines.append(f"• {item}")
        return self

    def field(self, label: str, value: object) -> "MarkdownBlockBuilder":
        """Append ``label: value`` when ``value`` is set."""
        if value not in (None, ''):
            self._lines.append(f"{label}: {escape_telegram_markdown(value)}")
        return self

    def blank(self) -> "MarkdownBlockBuilder":
        self._lines.append("")
        return self

    def extend(self, lines: Iterable[str]) -> "MarkdownBlockBuilder":
        for line in lines:
            self._lines.append(line)
        return self

    def build(self) -> str:
        return "\n".join(self._lines)


__all__ = [
    "MarkdownBlockBuilder",
    "bold_telegram_text",
    "escape_telegram_markdown",
    "format_price",
    "format_time_range",
]
