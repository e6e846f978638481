"""Split a Windows-style command line and query its flags and values."""

from __future__ import annotations

import re
from typing import Iterator, List, Optional, Tuple

_LEXEME = re.compile(
    r'(?P<slashes>\\*)(?P<quote>")'
    r"|(?P<space>[ \t]+)"
    r'|(?P<text>[^\\" \t]+|\\+)'
)


def split_command_line(line: str) -> List[str]:
    """Split ``line`` into arguments using the Windows C runtime rules.

    - spaces and tabs separate arguments outside double quotes;
    - ``2n`` backslashes before a quote give ``n`` backslashes and the quote
      opens or closes a quoted section;
    - ``2n+1`` backslashes before a quote give ``n`` backslashes and a
      literal quote;
    - backslashes not followed by a quote are literal;
    - inside a quoted section ``""`` gives a literal quote.
    """
    args: List[str] = []
    current: List[str] = []
    in_arg = False
    quoted = False
    pos = 0
    end = len(line)
    while pos < end:
        match = _LEXEME.match(line, pos)
        if match is None:  # every character is covered by one alternative
            raise ValueError(f"cannot split command line at position {pos}")
        pos = match.end()
        if match.group("quote") is not None:
            count = len(match.group("slashes"))
            current.append("\\" * (count // 2))
            in_arg = True
            if count % 2:
                current.append('"')
            elif quoted and line.startswith('"', pos):
                current.append('"')
                pos += 1
            else:
                quoted = not quoted
        elif match.group("space") is not None:
            if quoted:
                current.append(match.group("space"))
            elif in_arg:
                args.append("".join(current))
                current = []
                in_arg = False
        else:
            current.append(match.group("text"))
            in_arg = True
    if in_arg:
        args.append("".join(current))
    return args


class CommandLineArgs:
    """Arguments of a command line that does not include the program name."""

    def __init__(self, raw: Optional[str] = None) -> None:
        self.raw = raw if raw is not None else ""
        self.args: Tuple[str, ...] = (
            tuple(split_command_line(self.raw)) if self.raw else ()
        )

    def __len__(self) -> int:
        return len(self.args)

    def __iter__(self) -> Iterator[str]:
        return iter(self.args)

    def get(self, index: int) -> Optional[str]:
        """Argument at ``index`` (0-based), or ``None`` when out of range."""
        if index < 0 or index >= len(self.args):
            return None
        return self.args[index]

    def has_flag(self, flag: str) -> bool:
        """True if ``flag`` appears exactly (case-sensitive) among the arguments."""
        return flag in self.args

    def value(self, flag: str) -> Optional[str]:
        """Argument right after the first occurrence of ``flag``.

        ``None`` when the flag is absent or is the last argument.
        """
        try:
            position = self.args.index(flag)
        except ValueError:
            return None
        return self.get(position + 1)