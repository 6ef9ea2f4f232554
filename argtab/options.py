"""Command-line options that take floating-point numbers or file names."""

from __future__ import annotations

import math
import os
import re

from argtab.end import ErrorCode, OptionError


def format_option(
    shortopts: str | None,
    longopts: str | None,
    datatype: str | None,
    suffix: str | None,
) -> str:
    """Return the syntax of one option, such as ``-x|--name=<type>``, followed by ``suffix``."""
    short = shortopts[0] if shortopts else None
    long = longopts.split(",")[0] if longopts else None
    datatype = datatype or ""
    if short and long:
        text = f"-{short}|--{long}" + (f"={datatype}" if datatype else "")
    elif short:
        text = f"-{short}" + (f" {datatype}" if datatype else "")
    elif long:
        text = f"--{long}" + (f"={datatype}" if datatype else "")
    else:
        text = datatype
    return text + (suffix or "")


class Option:
    """An entry of an argument table that counts how often it occurs."""

    default_datatype: str | None = None

    def __init__(
        self,
        shortopts: str | None,
        longopts: str | None,
        datatype: str | None,
        mincount: int,
        maxcount: int,
        glossary: str | None,
    ) -> None:
        self.shortopts = shortopts
        self.longopts = longopts
        self.datatype = datatype if datatype is not None else self.default_datatype
        self.glossary = glossary
        self.mincount = mincount
        # a maximum below the minimum is raised to the minimum
        self.maxcount = max(maxcount, mincount)
        self.has_value = True
        self.optional_value = False
        self.count = 0

    def reset(self) -> None:
        """Forget the occurrences seen so far."""
        self.count = 0

    def _claim_slot(self, argval: str | None) -> None:
        if self.count == self.maxcount:
            raise OptionError(ErrorCode.MAXCOUNT, argval)

    def scan(self, argval: str | None) -> None:
        """Record one occurrence; raise :class:`OptionError` when there are too many."""
        self._claim_slot(argval)
        self.count += 1

    def check(self) -> None:
        """Raise :class:`OptionError` if the option occurred too few times."""
        if self.count < self.mincount:
            raise OptionError(ErrorCode.MINCOUNT)

    def describe(self, error: ErrorCode, argval: str | None, progname: str | None) -> str:
        """Return the message for an error this option raised."""
        argval = argval or ""
        head = f"{progname or ''}: "
        if error is ErrorCode.MINCOUNT:
            return head + "missing option " + format_option(
                self.shortopts, self.longopts, self.datatype, "\n"
            )
        if error is ErrorCode.MAXCOUNT:
            return head + "excess option " + format_option(
                self.shortopts, self.longopts, argval, "\n"
            )
        return head


_FLOAT_RE = re.compile(
    r"""
    [ \t\n\v\f\r]*
    (?P<sign>[+-]?)
    (?:
        (?P<hex>0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?\d+)?)
      | (?P<dec>(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)
      | (?P<inf>(?i:inf(?:inity)?))
      | (?P<nan>(?i:nan)(?:\([0-9A-Za-z_]*\))?)
    )
    """,
    re.VERBOSE,
)


def _parse_double(text: str) -> float:
    """Convert the whole of ``text`` the way the C library's strtod would, or raise ValueError."""
    if text == "":
        # strtod converts nothing and stops at the terminating NUL: accepted as zero
        return 0.0
    match = _FLOAT_RE.fullmatch(text)
    if match is None:
        raise ValueError(text)
    negative = match.group("sign") == "-"
    if match.group("hex"):
        value = float.fromhex(match.group("hex"))
    elif match.group("dec"):
        value = float(match.group("dec"))
    elif match.group("inf"):
        value = math.inf
    else:
        value = math.nan
    return -value if negative else value


class DoubleOption(Option):
    """An option whose values are floating-point numbers."""

    default_datatype = "<double>"

    def __init__(
        self,
        shortopts: str | None,
        longopts: str | None,
        datatype: str | None,
        mincount: int,
        maxcount: int,
        glossary: str | None,
    ) -> None:
        super().__init__(shortopts, longopts, datatype, mincount, maxcount, glossary)
        self.dval: list[float] = [0.0] * self.maxcount

    def scan(self, argval: str | None) -> None:
        """Store one value; ``None`` counts the option but leaves its value alone."""
        self._claim_slot(argval)
        if argval is None:
            self.count += 1
            return
        try:
            value = _parse_double(argval)
        except ValueError:
            raise OptionError(ErrorCode.BADDOUBLE, argval) from None
        self.dval[self.count] = value
        self.count += 1

    def describe(self, error: ErrorCode, argval: str | None, progname: str | None) -> str:
        if error is ErrorCode.BADDOUBLE:
            return f'{progname or ""}: invalid argument "{argval or ""}" to option ' + format_option(
                self.shortopts, self.longopts, self.datatype, "\n"
            )
        return super().describe(error, argval, progname)


def dbl0(shortopts, longopts, datatype, glossary) -> DoubleOption:
    """An optional floating-point option that may occur once."""
    return DoubleOption(shortopts, longopts, datatype, 0, 1, glossary)


def dbl1(shortopts, longopts, datatype, glossary) -> DoubleOption:
    """A required floating-point option that occurs exactly once."""
    return DoubleOption(shortopts, longopts, datatype, 1, 1, glossary)


def dbln(shortopts, longopts, datatype, mincount, maxcount, glossary) -> DoubleOption:
    """A floating-point option occurring between ``mincount`` and ``maxcount`` times."""
    return DoubleOption(shortopts, longopts, datatype, mincount, maxcount, glossary)


if os.name == "nt":
    _SEPARATORS = ("\\", "/")
else:
    _SEPARATORS = ("/", "/")


def file_basename(filename: str) -> str:
    """Return the part of ``filename`` after its last directory separator."""
    preferred, alternative = _SEPARATORS
    result = filename
    alt_pos = filename.rfind(alternative)
    if alt_pos >= 0:
        result = filename[alt_pos + 1:]
    pref_pos = filename.rfind(preferred)
    if pref_pos >= 0:
        result = filename[pref_pos + 1:]
    # "." and ".." name directories, not files
    if result in (".", ".."):
        return ""
    return result


def file_extension(basename: str) -> str:
    """Return the extension of ``basename`` including its dot, or an empty string."""
    pos = basename.rfind(".")
    if pos <= 0:
        # no dot at all, or a single leading dot such as ".profile"
        return ""
    extension = basename[pos:]
    if len(extension) == 1:
        # a trailing dot is not an extension
        return ""
    return extension


class FileOption(Option):
    """An option whose values are file names."""

    default_datatype = "<file>"

    def __init__(
        self,
        shortopts: str | None,
        longopts: str | None,
        datatype: str | None,
        mincount: int,
        maxcount: int,
        glossary: str | None,
    ) -> None:
        super().__init__(shortopts, longopts, datatype, mincount, maxcount, glossary)
        self.filename: list[str] = [""] * self.maxcount
        self.basename: list[str] = [""] * self.maxcount
        self.extension: list[str] = [""] * self.maxcount

    def scan(self, argval: str | None) -> None:
        """Store one file name with its base name and extension."""
        self._claim_slot(argval)
        if argval is not None:
            base = file_basename(argval)
            self.filename[self.count] = argval
            self.basename[self.count] = base
            self.extension[self.count] = file_extension(base)
        self.count += 1

    def describe(self, error: ErrorCode, argval: str | None, progname: str | None) -> str:
        if error in (ErrorCode.MINCOUNT, ErrorCode.MAXCOUNT):
            return super().describe(error, argval, progname)
        return f'{progname or ""}: unknown error at "{argval or ""}"\n'


def file0(shortopts, longopts, datatype, glossary) -> FileOption:
    """An optional file option that may occur once."""
    return FileOption(shortopts, longopts, datatype, 0, 1, glossary)


def file1(shortopts, longopts, datatype, glossary) -> FileOption:
    """A required file option that occurs exactly once."""
    return FileOption(shortopts, longopts, datatype, 1, 1, glossary)


def filen(shortopts, longopts, datatype, mincount, maxcount, glossary) -> FileOption:
    """A file option occurring between ``mincount`` and ``maxcount`` times."""
    return FileOption(shortopts, longopts, datatype, mincount, maxcount, glossary)