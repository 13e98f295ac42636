from __future__ import annotations

import html
import io
import re
from contextlib import redirect_stderr, redirect_stdout
from dataclasses import dataclass
from typing import List, Literal, Optional

import ipywidgets as w


Level = Literal["info", "warning", "error"]

_COLORS = {
    "error": "#b00020",
    "warning": "#b26a00",
    "info": "#222222",
}

_MONO = "ui-monospace, SFMono-Regular, Menlo, Monaco, Consolas, Liberation Mono, Courier New, monospace"


@dataclass
class _Entry:
    level: Level
    message: str
    count: int = 1


class HtmlLog:
    """
    Log panel for the visualizer, rendered into a single HTML widget.

    Slider drags fire many recomputes in a row, so consecutive identical
    messages are coalesced into one line with an ``(xN)`` suffix, and the
    history is bounded to ``max_entries``.

    Lines starting with ``ERROR:`` are shown in red, ``WARNING:`` in orange.
    """

    def __init__(self, *, title: str | None = None, height_px: int = 160, max_entries: int = 500) -> None:
        self._entries: List[_Entry] = []
        self._height_px = int(height_px)
        self._max_entries = int(max_entries)
        self.widget = w.HTML()
        if title:
            self.panel = w.VBox([w.HTML(f"<b>{html.escape(str(title))}</b>"), self.widget])
        else:
            self.panel = self.widget
        self.clear()

    @property
    def entries(self) -> List[tuple]:
        """``(level, message, count)`` for every displayed line, oldest first."""
        return [(e.level, e.message, e.count) for e in self._entries]

    def clear(self) -> None:
        self._entries.clear()
        self._render()

    def info(self, message: str) -> None:
        self._add("info", message)

    def warning(self, message: str) -> None:
        self._add("warning", message)

    def error(self, message: str) -> None:
        self._add("error", message)

    def write(self, message: str) -> None:
        """Add one or more lines, picking the level from each line's prefix."""
        txt = "" if message is None else str(message)
        plain = re.sub(r"<[^>]+>", "", txt)
        for line in plain.splitlines() or [""]:
            self._add(self._classify(line), line)

    def output_proxy(self) -> "_OutputProxy":
        """
        Context manager routing ``print`` output into this log:

            with log.output_proxy():
                print("WARNING: ...")
        """
        return _OutputProxy(self)

    # -------------------------
    # Internals
    # -------------------------
    @staticmethod
    def _classify(line: str) -> Level:
        s = (line or "").lstrip()
        if s.startswith(("ERROR:", "Error:", "Traceback")):
            return "error"
        if s.startswith(("WARNING:", "Warning:")):
            return "warning"
        return "info"

    def _add(self, level: Level, message: str) -> None:
        msg = "" if message is None else str(message)

        last = self._entries[-1] if self._entries else None
        if last is not None and last.level == level and last.message == msg:
            last.count += 1
        else:
            self._entries.append(_Entry(level=level, message=msg))
            if len(self._entries) > self._max_entries:
                self._entries = self._entries[-self._max_entries :]
        self._render()

    def _render(self) -> None:
        rows = []
        for e in self._entries:
            suffix = f" (x{e.count})" if e.count > 1 else ""
            rows.append(
                f"<div style='color:{_COLORS[e.level]}; white-space:pre-wrap; font-family:{_MONO};'>"
                f"{html.escape(e.message + suffix)}</div>"
            )

        inner = "".join(rows) if rows else "<div style='color:#666;'>Log is empty.</div>"
        self.widget.value = (
            f"<div style='border:1px solid #ddd; padding:8px; height:{self._height_px}px; "
            f"overflow-y:auto; background:#fff;'>{inner}</div>"
        )


class _OutputProxy:
    """Captures stdout/stderr inside a ``with`` block and forwards each line to an HtmlLog."""

    def __init__(self, log: HtmlLog) -> None:
        self._log = log
        self._buf: Optional[io.StringIO] = None
        self._cm_out = None
        self._cm_err = None

    def clear_output(self, wait: bool = False) -> None:
        _ = wait
        self._log.clear()

    def __enter__(self) -> "_OutputProxy":
        self._buf = io.StringIO()
        self._cm_out = redirect_stdout(self._buf)
        self._cm_err = redirect_stderr(self._buf)
        self._cm_out.__enter__()
        self._cm_err.__enter__()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        try:
            if self._cm_err is not None:
                self._cm_err.__exit__(exc_type, exc, tb)
        finally:
            if self._cm_out is not None:
                self._cm_out.__exit__(exc_type, exc, tb)

        text = self._buf.getvalue() if self._buf is not None else ""
        if text:
            self._log.write(text)
        return False
