"""Scanning of short and long command-line options in the getopt family style."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Callable, Iterator, Sequence

BADCH = "?"
INORDER = 1

_NOT_LONG = object()


class ArgumentKind(IntEnum):
    """Whether a long option takes an argument."""

    NO_ARGUMENT = 0
    REQUIRED_ARGUMENT = 1
    OPTIONAL_ARGUMENT = 2


@dataclass(frozen=True)
class LongOption:
    """A long option: its name, whether it takes an argument, and what it reports.

    When ``flag`` is given it is called with ``val`` and the scanner reports 0;
    otherwise the scanner reports ``val`` itself.
    """

    name: str
    has_arg: ArgumentKind = ArgumentKind.NO_ARGUMENT
    val: Any = 0
    flag: Callable[[Any], None] | None = None


class Getopt:
    """Stateful scanner over an argument vector whose first item is the program name.

    ``next`` returns the option found (a character for short options, the ``val``
    of a long option, ``"?"`` or ``":"`` on errors, ``1`` for a non-option when the
    option string starts with ``-``) or ``None`` once scanning is over. After the
    end, ``argv[optind:]`` holds the operands; with permutation they have been moved
    behind the options.
    """

    def __init__(
        self,
        argv: Sequence[str],
        options: str,
        long_options: Sequence[LongOption] | None = None,
        permute: bool = True,
        long_only: bool = False,
    ) -> None:
        self.argv: list[str] = list(argv)
        self.long_options = list(long_options) if long_options is not None else None
        self.long_only = long_only
        self.opterr = True
        self.optind = 1
        self.optopt: Any = "?"
        self.optarg: str | None = None
        self.longindex: int | None = None
        self.errmsg = ""

        self._posixly_correct = "POSIXLY_CORRECT" in os.environ
        self._all_args = False
        self._permute = permute
        if options.startswith("-"):
            self._all_args = True
        elif self._posixly_correct or options.startswith("+"):
            self._permute = False
        if options[:1] in ("+", "-") and options:
            options = options[1:]
        self._options = options

        self._place = ""
        self._pos = 0
        self._nonopt_start = -1
        self._nonopt_end = -1
        self._dash_prefix = ""

    # -- helpers ---------------------------------------------------------

    @property
    def _badarg(self) -> str:
        return ":" if self._options.startswith(":") else "?"

    def _place_empty(self) -> bool:
        return self._pos >= len(self._place)

    def _clear_place(self) -> None:
        self._place = ""
        self._pos = 0

    def _warn(self, message: str) -> None:
        self.errmsg = message
        if self.opterr and not self._options.startswith(":"):
            prog = os.path.basename(self.argv[0]) if self.argv else ""
            sys.stderr.write(f"{prog}: {message}\n")

    def _swap_blocks(self, start: int, end: int, opt_end: int) -> None:
        """Exchange argv[start:end] with argv[end:opt_end], keeping each block's order."""
        self.argv[start:opt_end] = self.argv[end:opt_end] + self.argv[start:end]

    def _parse_long(self, short_too: bool) -> Any:
        assert self.long_options is not None
        current = self._place[self._pos:]
        self.optind += 1

        eq = current.find("=")
        if eq >= 0:
            name, has_equal = current[:eq], current[eq + 1:]
        else:
            name, has_equal = current, None

        match = -1
        exact = False
        second_partial = False
        for index, option in enumerate(self.long_options):
            if not option.name.startswith(name):
                continue
            if len(option.name) == len(name):
                match = index
                exact = True
                break
            # a known short option may not be a one-letter abbreviation
            if short_too and len(name) == 1:
                continue
            if match == -1:
                match = index
            else:
                first = self.long_options[match]
                if (
                    self.long_only
                    or option.has_arg != first.has_arg
                    or option.flag is not first.flag
                    or option.val != first.val
                ):
                    second_partial = True

        if not exact and second_partial:
            self._warn(f"option `{self._dash_prefix}{name}' is ambiguous")
            self.optopt = 0
            return BADCH

        if match == -1:
            if short_too:
                self.optind -= 1
                return _NOT_LONG
            self._warn(f"unrecognized option `{self._dash_prefix}{current}'")
            self.optopt = 0
            return BADCH

        option = self.long_options[match]
        if option.has_arg == ArgumentKind.NO_ARGUMENT and has_equal is not None:
            self._warn(f"option `{self._dash_prefix}{name}' doesn't allow an argument")
            self.optopt = option.val if option.flag is None else 0
            return BADCH
        if option.has_arg in (ArgumentKind.REQUIRED_ARGUMENT, ArgumentKind.OPTIONAL_ARGUMENT):
            if has_equal is not None:
                self.optarg = has_equal
            elif option.has_arg == ArgumentKind.REQUIRED_ARGUMENT:
                self.optarg = self.argv[self.optind] if self.optind < len(self.argv) else None
                self.optind += 1
        if option.has_arg == ArgumentKind.REQUIRED_ARGUMENT and self.optarg is None:
            self._warn(f"option `{self._dash_prefix}{current}' requires an argument")
            self.optopt = option.val if option.flag is None else 0
            self.optind -= 1
            return self._badarg

        self.longindex = match
        if option.flag is not None:
            option.flag(option.val)
            return 0
        return option.val

    # -- scanning --------------------------------------------------------

    def next(self) -> Any:
        """Scan the next option; return ``None`` when there are no more."""
        self.optarg = None
        nargc = len(self.argv)

        while self._place_empty():
            if self.optind >= nargc:
                self._clear_place()
                if self._nonopt_end != -1:
                    self._swap_blocks(self._nonopt_start, self._nonopt_end, self.optind)
                    self.optind -= self._nonopt_end - self._nonopt_start
                elif self._nonopt_start != -1:
                    self.optind = self._nonopt_start
                self._nonopt_start = self._nonopt_end = -1
                return None

            arg = self.argv[self.optind]
            if not arg.startswith("-") or arg == "-":
                self._clear_place()
                if self._all_args:
                    self.optarg = arg
                    self.optind += 1
                    return INORDER
                if not self._permute:
                    return None
                if self._nonopt_start == -1:
                    self._nonopt_start = self.optind
                elif self._nonopt_end != -1:
                    self._swap_blocks(self._nonopt_start, self._nonopt_end, self.optind)
                    self._nonopt_start = self.optind - (self._nonopt_end - self._nonopt_start)
                    self._nonopt_end = -1
                self.optind += 1
                continue

            if self._nonopt_start != -1 and self._nonopt_end == -1:
                self._nonopt_end = self.optind

            self._place = arg
            self._pos = 1
            if arg == "--":
                self.optind += 1
                self._clear_place()
                if self._nonopt_end != -1:
                    self._swap_blocks(self._nonopt_start, self._nonopt_end, self.optind)
                    self.optind -= self._nonopt_end - self._nonopt_start
                self._nonopt_start = self._nonopt_end = -1
                return None
            break

        if (
            self.long_options is not None
            and self._pos != 0
            and (self._place[self._pos] == "-" or self.long_only)
        ):
            short_too = False
            self._dash_prefix = "-"
            if self._place[self._pos] == "-":
                self._pos += 1
                if self._place_empty():
                    return self._badarg
                self._dash_prefix = "--"
            else:
                head = self._place[self._pos]
                if head != ":" and head in self._options:
                    short_too = True
            result = self._parse_long(short_too)
            if result is not _NOT_LONG:
                self._clear_place()
                return result

        optchar = self._place[self._pos]
        self._pos += 1
        rest_empty = self._place_empty()
        oli = self._options.find(optchar)
        if optchar == ":" or (optchar == "-" and not rest_empty) or oli < 0:
            if optchar == "-" and rest_empty:
                return None
            if rest_empty:
                self.optind += 1
            template = "illegal option -- %s" if self._posixly_correct else "invalid option -- %s"
            self._warn(template % optchar)
            self.optopt = optchar
            return BADCH

        if (
            self.long_options is not None
            and optchar == "W"
            and self._options[oli + 1:oli + 2] == ";"
        ):
            if rest_empty:
                self.optind += 1
                if self.optind >= nargc:
                    self._clear_place()
                    self._warn(f"option requires an argument -- {optchar}")
                    self.optopt = optchar
                    return self._badarg
                self._place = self.argv[self.optind]
                self._pos = 0
            self._dash_prefix = "-W "
            result = self._parse_long(False)
            self._clear_place()
            return result

        if self._options[oli + 1:oli + 2] != ":":
            if rest_empty:
                self.optind += 1
        else:
            self.optarg = None
            if not rest_empty:
                self.optarg = self._place[self._pos:]
            elif self._options[oli + 2:oli + 3] != ":":
                self.optind += 1
                if self.optind >= nargc:
                    self._clear_place()
                    self._warn(f"option requires an argument -- {optchar}")
                    self.optopt = optchar
                    return self._badarg
                self.optarg = self.argv[self.optind]
            self._clear_place()
            self.optind += 1
        return optchar

    def __iter__(self) -> Iterator[tuple[Any, str | None]]:
        """Yield ``(option, argument)`` pairs until scanning is over."""
        while True:
            result = self.next()
            if result is None:
                return
            yield result, self.optarg


def _run(scanner: Getopt) -> tuple[list[tuple[Any, str | None]], list[str]]:
    found = list(scanner)
    return found, scanner.argv[scanner.optind:]


def getopt(argv: Sequence[str], options: str) -> tuple[list[tuple[Any, str | None]], list[str]]:
    """Scan short options only, stopping at the first operand; return (options, operands)."""
    return _run(Getopt(argv, options, None, False, False))


def getopt_long(
    argv: Sequence[str], options: str, long_options: Sequence[LongOption]
) -> tuple[list[tuple[Any, str | None]], list[str]]:
    """Scan short and ``--long`` options, moving operands to the end."""
    return _run(Getopt(argv, options, long_options, True, False))


def getopt_long_only(
    argv: Sequence[str], options: str, long_options: Sequence[LongOption]
) -> tuple[list[tuple[Any, str | None]], list[str]]:
    """Like :func:`getopt_long`, but long options may also start with a single dash."""
    return _run(Getopt(argv, options, long_options, True, True))