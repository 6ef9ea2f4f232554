"""A command-line option whose values are calendar dates and times."""

from __future__ import annotations

from dataclasses import replace

from argtab.end import ErrorCode, OptionError
from argtab.options import Option
from argtab.strptime import TimeStruct, format_time, strptime


class DateOption(Option):
    """An option whose values are parsed with a strptime-style format."""

    def __init__(
        self,
        shortopts: str | None,
        longopts: str | None,
        format: str | None,
        datatype: str | None,
        mincount: int,
        maxcount: int,
        glossary: str | None,
    ) -> None:
        # the default is the locale's date format
        self.format = format if format is not None else "%x"
        super().__init__(
            shortopts,
            longopts,
            datatype if datatype is not None else self.format,
            mincount,
            maxcount,
            glossary,
        )
        self.tmval: list[TimeStruct] = [TimeStruct() for _ in range(self.maxcount)]

    def scan(self, argval: str | None) -> None:
        """Store one parsed time; ``None`` counts the option but leaves its value alone."""
        self._claim_slot(argval)
        if argval is None:
            self.count += 1
            return
        tm = replace(self.tmval[self.count])
        try:
            rest = strptime(argval, self.format, tm)
        except ValueError:
            raise OptionError(ErrorCode.BADDATE, argval) from None
        if rest:
            raise OptionError(ErrorCode.BADDATE, argval)
        self.tmval[self.count] = tm
        self.count += 1

    def describe(self, error: ErrorCode, argval: str | None, progname: str | None) -> str:
        if error is ErrorCode.BADDATE:
            sample = TimeStruct()
            try:
                strptime("1999-12-31 23:59:59", "%F %H:%M:%S", sample)
            except ValueError:
                pass
            example = format_time(self.format, sample)
            return (
                f'{progname or ""}: illegal timestamp format "{argval or ""}"\n'
                f'correct format is "{example}"\n'
            )
        return super().describe(error, argval, progname)


def date0(shortopts, longopts, format, datatype, glossary) -> DateOption:
    """An optional date option that may occur once."""
    return DateOption(shortopts, longopts, format, datatype, 0, 1, glossary)


def date1(shortopts, longopts, format, datatype, glossary) -> DateOption:
    """A required date option that occurs exactly once."""
    return DateOption(shortopts, longopts, format, datatype, 1, 1, glossary)


def daten(shortopts, longopts, format, datatype, mincount, maxcount, glossary) -> DateOption:
    """A date option occurring between ``mincount`` and ``maxcount`` times."""
    return DateOption(shortopts, longopts, format, datatype, mincount, maxcount, glossary)