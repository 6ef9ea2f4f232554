"""Parsing and formatting of calendar times with a fixed, C-locale set of conversions."""

from __future__ import annotations

import calendar
from dataclasses import dataclass

_SPACE = " \t\n\v\f\r"
_ALT_E = 0x01
_ALT_O = 0x02
_YEAR_BASE = 1900

_DAYS = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")
_ABDAYS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")
_MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
_ABMONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

# composite conversions: (expansion, modifiers allowed)
_COMPOSITE = {
    "c": ("%x %X", _ALT_E),
    "D": ("%m/%d/%y", 0),
    "R": ("%H:%M", 0),
    "r": ("%I:%M:%S %p", 0),
    "T": ("%H:%M:%S", 0),
    "X": ("%H:%M:%S", _ALT_E),
    "x": ("%m/%d/%y", _ALT_E),
}

_ASCII_LOWER = str.maketrans("ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz")


@dataclass
class TimeStruct:
    """Broken-down calendar time with the same fields and conventions as ``struct tm``."""

    tm_sec: int = 0
    tm_min: int = 0
    tm_hour: int = 0
    tm_mday: int = 0
    tm_mon: int = 0
    tm_year: int = 0
    tm_wday: int = 0
    tm_yday: int = 0
    tm_isdst: int = 0


def _lower(text: str) -> str:
    return text.translate(_ASCII_LOWER)


def _is_digit(ch: str) -> bool:
    return len(ch) == 1 and "0" <= ch <= "9"


def _c_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _c_mod(a: int, b: int) -> int:
    return a - b * _c_div(a, b)


class _Cursor:
    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def peek(self) -> str:
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def rest(self) -> str:
        return self.text[self.pos:]

    def skip_space(self) -> None:
        while self.pos < len(self.text) and self.text[self.pos] in _SPACE:
            self.pos += 1

    def starts_with_name(self, name: str) -> bool:
        chunk = self.text[self.pos:self.pos + len(name)]
        return _lower(chunk) == _lower(name)


def _fail(cur: _Cursor, fmt: str) -> ValueError:
    return ValueError(f"{cur.text!r} does not match format {fmt!r} at position {cur.pos}")


def _legal(alt: int, allowed: int, cur: _Cursor, fmt: str) -> None:
    if alt & ~allowed:
        raise _fail(cur, fmt)


def _conv_num(cur: _Cursor, low: int, high: int, fmt: str) -> int:
    """Read a decimal number whose digit count is bounded by ``high``."""
    if not _is_digit(cur.peek()):
        raise _fail(cur, fmt)
    result = 0
    remaining = high
    while True:
        result = result * 10 + int(cur.text[cur.pos])
        cur.pos += 1
        remaining //= 10
        if not (result * 10 <= high and remaining and _is_digit(cur.peek())):
            break
    if result < low or result > high:
        raise _fail(cur, fmt)
    return result


def _match_name(cur: _Cursor, full: tuple[str, ...], abbr: tuple[str, ...], fmt: str) -> int:
    for index, (long_name, short_name) in enumerate(zip(full, abbr)):
        if cur.starts_with_name(long_name):
            cur.pos += len(long_name)
            return index
        if cur.starts_with_name(short_name):
            cur.pos += len(short_name)
            return index
    raise _fail(cur, fmt)


def _parse(cur: _Cursor, fmt: str, tm: TimeStruct) -> None:
    split_year = False
    f = 0
    while f < len(fmt):
        c = fmt[f]
        if c in _SPACE:
            cur.skip_space()
            f += 1
            continue
        f += 1
        if c != "%":
            if cur.peek() != c:
                raise _fail(cur, fmt)
            cur.pos += 1
            continue

        alt = 0
        while True:
            c = fmt[f] if f < len(fmt) else ""
            f += 1
            if c == "E":
                _legal(alt, 0, cur, fmt)
                alt |= _ALT_E
            elif c == "O":
                _legal(alt, 0, cur, fmt)
                alt |= _ALT_O
            else:
                break

        if c == "%":
            if cur.peek() != "%":
                raise _fail(cur, fmt)
            cur.pos += 1
        elif c in _COMPOSITE:
            expansion, allowed = _COMPOSITE[c]
            _legal(alt, allowed, cur, fmt)
            _parse(cur, expansion, tm)
        elif c in ("A", "a"):
            _legal(alt, 0, cur, fmt)
            tm.tm_wday = _match_name(cur, _DAYS, _ABDAYS, fmt)
        elif c in ("B", "b", "h"):
            _legal(alt, 0, cur, fmt)
            tm.tm_mon = _match_name(cur, _MONTHS, _ABMONTHS, fmt)
        elif c == "C":
            _legal(alt, _ALT_E, cur, fmt)
            century = _conv_num(cur, 0, 99, fmt)
            if split_year:
                tm.tm_year = _c_mod(tm.tm_year, 100) + century * 100
            else:
                tm.tm_year = century * 100
                split_year = True
        elif c in ("d", "e"):
            _legal(alt, _ALT_O, cur, fmt)
            tm.tm_mday = _conv_num(cur, 1, 31, fmt)
        elif c in ("k", "H"):
            if c == "k":
                _legal(alt, 0, cur, fmt)
            _legal(alt, _ALT_O, cur, fmt)
            tm.tm_hour = _conv_num(cur, 0, 23, fmt)
        elif c in ("l", "I"):
            if c == "l":
                _legal(alt, 0, cur, fmt)
            _legal(alt, _ALT_O, cur, fmt)
            hour = _conv_num(cur, 1, 12, fmt)
            tm.tm_hour = 0 if hour == 12 else hour
        elif c == "j":
            _legal(alt, 0, cur, fmt)
            tm.tm_yday = _conv_num(cur, 1, 366, fmt) - 1
        elif c == "M":
            _legal(alt, _ALT_O, cur, fmt)
            tm.tm_min = _conv_num(cur, 0, 59, fmt)
        elif c == "m":
            _legal(alt, _ALT_O, cur, fmt)
            tm.tm_mon = _conv_num(cur, 1, 12, fmt) - 1
        elif c == "p":
            _legal(alt, 0, cur, fmt)
            # the marker must make up the whole of the remaining input
            rest = _lower(cur.rest())
            if rest == "am":
                if tm.tm_hour > 11:
                    raise _fail(cur, fmt)
                cur.pos += 2
            elif rest == "pm":
                if tm.tm_hour > 11:
                    raise _fail(cur, fmt)
                tm.tm_hour += 12
                cur.pos += 2
            else:
                raise _fail(cur, fmt)
        elif c == "S":
            _legal(alt, _ALT_O, cur, fmt)
            tm.tm_sec = _conv_num(cur, 0, 61, fmt)
        elif c in ("U", "W"):
            _legal(alt, _ALT_O, cur, fmt)
            # only the range is checked; the week number is not stored
            _conv_num(cur, 0, 53, fmt)
        elif c == "w":
            _legal(alt, _ALT_O, cur, fmt)
            tm.tm_wday = _conv_num(cur, 0, 6, fmt)
        elif c == "Y":
            _legal(alt, _ALT_E, cur, fmt)
            tm.tm_year = _conv_num(cur, 0, 9999, fmt) - _YEAR_BASE
        elif c == "y":
            _legal(alt, _ALT_E | _ALT_O, cur, fmt)
            value = _conv_num(cur, 0, 99, fmt)
            if split_year:
                tm.tm_year = _c_div(tm.tm_year, 100) * 100 + value
            else:
                split_year = True
                tm.tm_year = value + (2000 if value <= 68 else 1900) - _YEAR_BASE
        elif c in ("n", "t"):
            _legal(alt, 0, cur, fmt)
            cur.skip_space()
        else:
            raise _fail(cur, fmt)


def strptime(text: str, fmt: str, tm: TimeStruct) -> str:
    """Parse ``text`` against ``fmt`` into ``tm`` and return the unconsumed rest of ``text``.

    Fields that ``fmt`` does not mention are left as they were. Raises ValueError
    when the text does not match; ``tm`` may then be partly updated.
    """
    cur = _Cursor(text)
    _parse(cur, fmt, tm)
    return cur.rest()


def _pick(names: tuple[str, ...], index: int) -> str:
    return names[index] if 0 <= index < len(names) else "?"


def _iso_week_days(yday: int, wday: int) -> int:
    return yday - (yday - wday + 4 + 378) % 7 + 3


def _iso_year_week(tm: TimeStruct) -> tuple[int, int]:
    year = tm.tm_year + _YEAR_BASE
    days = _iso_week_days(tm.tm_yday, tm.tm_wday)
    if days < 0:
        year -= 1
        previous_length = 366 if calendar.isleap(year) else 365
        days = _iso_week_days(tm.tm_yday + previous_length, tm.tm_wday)
    else:
        current_length = 366 if calendar.isleap(year) else 365
        following = _iso_week_days(tm.tm_yday - current_length, tm.tm_wday)
        if following >= 0:
            year += 1
            days = following
    return year, days // 7 + 1


def _convert(conv: str, tm: TimeStruct) -> str | None:
    year = tm.tm_year + _YEAR_BASE
    hour12 = tm.tm_hour % 12 or 12
    if conv in _COMPOSITE or conv == "F":
        expansion = "%Y-%m-%d" if conv == "F" else _COMPOSITE[conv][0]
        if conv == "c":
            expansion = "%a %b %e %H:%M:%S %Y"
        return format_time(expansion, tm)
    simple = {
        "a": lambda: _pick(_ABDAYS, tm.tm_wday),
        "A": lambda: _pick(_DAYS, tm.tm_wday),
        "b": lambda: _pick(_ABMONTHS, tm.tm_mon),
        "h": lambda: _pick(_ABMONTHS, tm.tm_mon),
        "B": lambda: _pick(_MONTHS, tm.tm_mon),
        "C": lambda: f"{_c_div(year, 100):02d}",
        "d": lambda: f"{tm.tm_mday:02d}",
        "e": lambda: f"{tm.tm_mday:2d}",
        "H": lambda: f"{tm.tm_hour:02d}",
        "k": lambda: f"{tm.tm_hour:2d}",
        "I": lambda: f"{hour12:02d}",
        "l": lambda: f"{hour12:2d}",
        "j": lambda: f"{tm.tm_yday + 1:03d}",
        "m": lambda: f"{tm.tm_mon + 1:02d}",
        "M": lambda: f"{tm.tm_min:02d}",
        "S": lambda: f"{tm.tm_sec:02d}",
        "p": lambda: "AM" if tm.tm_hour < 12 else "PM",
        "P": lambda: "am" if tm.tm_hour < 12 else "pm",
        "n": lambda: "\n",
        "t": lambda: "\t",
        "u": lambda: str((tm.tm_wday - 1) % 7 + 1),
        "w": lambda: str(tm.tm_wday),
        "U": lambda: f"{(tm.tm_yday - tm.tm_wday + 7) // 7:02d}",
        "W": lambda: f"{(tm.tm_yday - (tm.tm_wday - 1 + 7) % 7 + 7) // 7:02d}",
        "y": lambda: f"{year % 100:02d}",
        "Y": lambda: str(year),
        "G": lambda: str(_iso_year_week(tm)[0]),
        "g": lambda: f"{_iso_year_week(tm)[0] % 100:02d}",
        "V": lambda: f"{_iso_year_week(tm)[1]:02d}",
        "%": lambda: "%",
    }
    producer = simple.get(conv)
    return producer() if producer is not None else None


def format_time(fmt: str, tm: TimeStruct) -> str:
    """Format ``tm`` according to ``fmt`` using the C locale's names and layouts.

    Conversions that are not known are copied to the output unchanged.
    """
    out: list[str] = []
    i = 0
    n = len(fmt)
    while i < n:
        c = fmt[i]
        i += 1
        if c != "%":
            out.append(c)
            continue
        start = i - 1
        while i < n and fmt[i] in "EO":
            i += 1
        if i >= n:
            out.append(fmt[start:])
            break
        conv = fmt[i]
        i += 1
        piece = _convert(conv, tm)
        out.append(fmt[start:i] if piece is None else piece)
    return "".join(out)