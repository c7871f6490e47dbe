"""Terminal rendering of a resolved fatal error."""

import re
from dataclasses import dataclass

from rich.console import Console
from rich.text import Text

from faulthint.normalization.models import NormalizedError
from faulthint.resolver.fix_extractor import FixExtractor

_FRAME_PREFIX = 'File "'
_LOCATION = re.compile(r'^File "(?P<path>[^"]+)", line (?P<line>\d+)(?:, in (?P<func>.+))?$')


@dataclass(frozen=True)
class TrimmedTrace:
    frames: list[str]
    hidden: int


def trim_trace(trace: str, limit: int) -> TrimmedTrace:
    """Keep the ``limit`` most recent frame locations of a Python traceback."""
    frames = [
        line.strip()
        for line in trace.splitlines()
        if line.strip().startswith(_FRAME_PREFIX)
    ]
    kept = frames[-limit:] if limit > 0 else []
    return TrimmedTrace(frames=kept, hidden=len(frames) - len(kept))


class ConsolePresenter:
    """Prints category, cause, fixes and the trimmed trace with rich."""

    def __init__(
        self,
        console: Console | None = None,
        fix_extractor: FixExtractor | None = None,
        trace_frames: int = 3,
    ) -> None:
        self._console = console or Console(stderr=True, highlight=False)
        self._fix_extractor = fix_extractor or FixExtractor()
        self._trace_frames = trace_frames

    def present(self, error: NormalizedError, hint: str | None) -> None:
        console = self._console
        console.print()
        console.print(Text(f" 🚨 ERROR: {error.category} ", style="bold white on red"))
        if error.message:
            console.print(Text(f"➤ {error.message}", style="bold red"))

        if hint:
            self._print_hint(hint)
        else:
            console.print()
            console.print(
                Text("⚠️  No specific suggestion for this error yet.", style="yellow")
            )
            console.print(
                Text("   This might be a complex or uncommon error pattern.", style="yellow")
            )

        self._print_trace(error.trace)
        console.print()

    def _print_hint(self, hint: str) -> None:
        console = self._console
        console.print()
        console.print(Text(" 💡 WHY THIS HAPPENS ", style="bold black on green"))
        for line in hint.splitlines():
            console.print(Text(f"  {line}", style="green"))

        console.print()
        console.print(Text(" 🔧 HOW TO FIX IT ", style="bold white on blue"))
        for line in self._fix_extractor.extract(hint):
            console.print(Text(f"  {line}", style="blue"))

    def _print_trace(self, trace: str) -> None:
        trimmed = trim_trace(trace, self._trace_frames)
        if not trimmed.frames:
            return
        console = self._console
        console.print()
        console.print(Text(" 📍 WHERE TO LOOK ", style="bold black on yellow"))
        for frame in trimmed.frames:
            console.print(Text("  → ", style="dim") + _frame_text(frame))
        if trimmed.hidden:
            console.print(Text(f"  ... ({trimmed.hidden} more stack frames)", style="dim"))


def _frame_text(frame: str) -> Text:
    match = _LOCATION.match(frame)
    if match is None:
        return Text(frame)
    text = Text()
    text.append(f"{match['path']}:{match['line']}", style="yellow")
    if match["func"]:
        text.append(f" in {match['func']}")
    return text
