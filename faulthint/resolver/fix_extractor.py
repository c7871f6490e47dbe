FIX_HEADINGS = ("How to fix:", "HOW TO FIX")
BULLET_MARKERS = ("-", "*")
FALLBACK_FIX = "Check your code carefully using the suggestions above"


class FixExtractor:
    """Derives a short list of remediation lines from an explanation."""

    def extract(self, explanation: str) -> list[str]:
        """Return the fix lines of ``explanation``; never empty.

        Priority: the lines under a "How to fix:" heading, then every bullet
        line, then a single generic instruction.
        """
        lines = explanation.splitlines()
        return (
            self._fix_section(lines)
            or self._bullets(lines)
            or [FALLBACK_FIX]
        )

    @staticmethod
    def _fix_section(lines: list[str]) -> list[str]:
        start = next(
            (i for i, line in enumerate(lines) if any(h in line for h in FIX_HEADINGS)),
            None,
        )
        if start is None:
            return []
        collected: list[str] = []
        for raw in lines[start + 1:]:
            line = raw.strip()
            if not line or _is_heading(line):
                break
            collected.append(line)
        return collected

    @staticmethod
    def _bullets(lines: list[str]) -> list[str]:
        return [line.strip() for line in lines if line.strip().startswith(BULLET_MARKERS)]


def _is_heading(line: str) -> bool:
    return line.startswith("#") and line.endswith("#")
