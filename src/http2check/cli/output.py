# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Colored terminal output built on rich."""

from __future__ import annotations

from typing import IO

from rich.console import Console
from rich.text import Text

from ..config import OutputSettings

Fragment = str | Text


class TextOutput:
    """
    Small wrapper around two rich consoles (stdout and stderr).

    Colors follow ``OutputSettings.color`` and quiet mode silences both
    streams. Markup is disabled so targets such as ``[::1]`` print literally.
    """

    def __init__(
        self,
        settings: OutputSettings | None = None,
        *,
        stdout: IO[str] | None = None,
        stderr: IO[str] | None = None,
    ):
        self.settings = settings or OutputSettings()
        common = {
            "color_system": "auto" if self.settings.color else None,
            "quiet": self.settings.quiet,
            "markup": False,
            "highlight": False,
            "emoji": False,
            "soft_wrap": True,
        }
        self.console = Console(file=stdout, **common)
        self.err_console = Console(file=stderr, stderr=stderr is None, **common)

    @property
    def enabled(self) -> bool:
        return not self.settings.quiet

    def println(self, *fragments: Fragment) -> None:
        self.console.print(Text.assemble(*fragments))

    def message(self, subject: str, msg: Fragment, extra: str | None = None) -> None:
        """Write ``[subject] msg`` with an optional ``(extra)`` suffix."""
        line = Text.assemble(self.dark_gray("["), self.light_blue(subject), self.dark_gray("]"), " ", msg)
        if extra:
            line.append(f" ({extra})")
        self.console.print(line)

    def error(self, msg: str) -> None:
        self.err_console.print(self.dark_red(msg))

    def dark_gray(self, text: str) -> Text:
        return Text(text, style="bright_black")

    def dark_red(self, text: str) -> Text:
        return Text(text, style="red")

    def light_blue(self, text: str) -> Text:
        return Text(text, style="bright_blue")

    def light_cyan(self, text: str) -> Text:
        return Text(text, style="bright_cyan")

    def light_yellow(self, text: str) -> Text:
        return Text(text, style="bright_yellow")

    def white(self, text: str) -> Text:
        return Text(text, style="bright_white")


__all__ = ["TextOutput"]
