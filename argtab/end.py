"""Collection and reporting of errors found while parsing a command line."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Iterator, TextIO

from argtab.dstr import DynamicString


class ErrorCode(Enum):
    """Kinds of error recorded during parsing."""

    LIMIT = auto()
    MALLOC = auto()
    NOMATCH = auto()
    LONGOPT = auto()
    MISSARG = auto()
    MINCOUNT = auto()
    MAXCOUNT = auto()
    BADINT = auto()
    OVERFLOW = auto()
    BADDOUBLE = auto()
    BADDATE = auto()
    REGNOMATCH = auto()


class OptionError(Exception):
    """Raised when an option rejects a value it was given."""

    def __init__(self, code: ErrorCode, argval: str | None = None) -> None:
        super().__init__(code, argval)
        self.code = code
        self.argval = argval

    def __str__(self) -> str:
        if self.argval is None:
            return self.code.name.lower()
        return f"{self.code.name.lower()}: {self.argval!r}"


@dataclass(frozen=True)
class ErrorRecord:
    """One recorded error: which table entry raised it, what, and on which value."""

    parent: Any
    error: Any
    argval: str | None


class End:
    """Terminating entry of an argument table that stores parse errors."""

    def __init__(self, maxcount: int) -> None:
        self.shortopts = None
        self.longopts = None
        self.datatype = None
        self.glossary = None
        self.mincount = 1
        self.maxcount = maxcount
        self._records: list[ErrorRecord] = []

    @property
    def count(self) -> int:
        return len(self._records)

    def reset(self) -> None:
        """Forget all recorded errors."""
        self._records.clear()

    def add(self, parent: Any, error: Any, argval: str | None = None) -> None:
        """Record an error; once full, the last slot reports that there are too many."""
        if self.maxcount <= 0:
            return
        if len(self._records) < self.maxcount:
            self._records.append(ErrorRecord(parent, error, argval))
        else:
            self._records[-1] = ErrorRecord(self, ErrorCode.LIMIT, None)

    def describe(self, error: Any, argval: str | None, progname: str | None) -> str:
        """Return the message for one of the parser's own errors."""
        progname = progname or ""
        argval = argval or ""
        if error is ErrorCode.LIMIT:
            body = "too many errors to display"
        elif error is ErrorCode.MALLOC:
            body = "insufficient memory"
        elif error is ErrorCode.NOMATCH:
            body = f'unexpected argument "{argval}"'
        elif error is ErrorCode.MISSARG:
            body = f'option "{argval}" requires an argument'
        elif error is ErrorCode.LONGOPT:
            body = f'invalid option "{argval}"'
        else:
            char = chr(error) if isinstance(error, int) else str(error)
            body = f'invalid option "-{char}"'
        return f"{progname}: {body}\n"

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[ErrorRecord]:
        return iter(list(self._records))


def format_errors(end: End, progname: str | None) -> str:
    """Return the messages for every error recorded in ``end``."""
    out = DynamicString()
    for record in end:
        describe = getattr(record.parent, "describe", None)
        if describe is not None:
            out.cat(describe(record.error, record.argval, progname))
    return str(out)


def print_errors(end: End, progname: str | None, stream: TextIO | None = None) -> None:
    """Write the messages for every recorded error to ``stream`` (stdout by default)."""
    (stream if stream is not None else sys.stdout).write(format_errors(end, progname))