"""
L1 Domain — Install command value type (pure).

A program plus its argument list, and the display-quoting rule used
for dry-run output and audit logging. No I/O, no subprocess.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from qbit.core.services.install.errors import InvalidInput

# Tokens made only of these characters are rendered verbatim.
_SAFE_TOKEN = re.compile(r"[A-Za-z0-9._/:@=-]+")


def quote_for_display(token: str) -> str:
    """Quote a single token for display.

    Safe tokens pass through unchanged, the empty string becomes ``""``
    and anything else is wrapped in double quotes with ``\\`` and ``"``
    escaped.
    """
    if not token:
        return '""'
    if _SAFE_TOKEN.fullmatch(token):
        return token
    escaped = token.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


@dataclass(frozen=True)
class InstallCommand:
    """A program and its ordered arguments, ready to spawn or render."""

    program: str
    args: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not self.program or not self.program.strip():
            raise InvalidInput("Install command program must not be empty.")
        # Accept any sequence but store a tuple so the command stays immutable.
        object.__setattr__(self, "args", tuple(self.args))

    @property
    def argv(self) -> list[str]:
        """Command list suitable for ``subprocess.run()``."""
        return [self.program, *self.args]

    def render(self) -> str:
        """Join the quoted program and arguments with single spaces."""
        return " ".join(quote_for_display(t) for t in self.argv)

    def with_flag_after(self, subcommand: str, flag: str) -> InstallCommand:
        """Return a copy with ``flag`` inserted right after ``subcommand``.

        The flag is appended when the subcommand token is absent. If the
        flag is already present the same command is returned, so applying
        it twice never duplicates it.
        """
        if flag in self.args:
            return self
        args = list(self.args)
        try:
            idx = args.index(subcommand)
        except ValueError:
            args.append(flag)
        else:
            args.insert(idx + 1, flag)
        return InstallCommand(self.program, tuple(args))

    def __str__(self) -> str:
        return self.render()
