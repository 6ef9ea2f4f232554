# argtab

Building blocks for command-line option parsing. Each option is an object
that knows how many times it may appear, how to turn an argument value into
data, and how to describe what went wrong. Errors are gathered in an `End`
collector and turned into readable messages. A getopt-style scanner splits
an argument vector into options and operands.

## Install

```
pip install argtab
```

Install with the `test` extra to run the test suite with pytest.

## Modules

- `argtab.dstr`: `DynamicString`, a growing text buffer with `set`, `cat`,
  `catc`, printf-style `catf` and `reset`; `str()` returns its contents.
- `argtab.end`: `ErrorCode`, the `OptionError` exception (with `code` and
  `argval`), `ErrorRecord`, the `End` collector (`add`, `reset`,
  `describe`, `len()` and iteration over records), plus `format_errors`
  and `print_errors`. Once an `End` is full, its last slot is replaced by a
  "too many errors to display" record.
- `argtab.options`: the `Option` base class (`scan`, `check`, `reset`,
  `describe`, `count`), `DoubleOption` (values in `dval`) and `FileOption`
  (values in `filename`, `basename` and `extension`), the factories
  `dbl0`/`dbl1`/`dbln` and `file0`/`file1`/`filen`, and the helpers
  `format_option`, `file_basename` and `file_extension`.
- `argtab.strptime`: `TimeStruct`, a mutable broken-down time with the
  fields of `struct tm`; a locale-independent `strptime` that fills a
  `TimeStruct` and returns the unconsumed text; and `format_time`.
- `argtab.date`: `DateOption` (values in `tmval`) and the factories
  `date0`/`date1`/`daten`. The default format is `%x` (`%m/%d/%y`).
- `argtab.getopt`: the `Getopt` scanner with `getopt`, `getopt_long` and
  `getopt_long_only`, described by `LongOption` and `ArgumentKind`.

## Options and errors

```python
from argtab.end import End, OptionError, format_errors
from argtab.options import dbl1, file0

scale = dbl1("s", "scale", None, "scale factor")
out = file0("o", "output", None, "output file")
end = End(20)

for option, value in ((scale, "2.5"), (out, "/tmp/report.txt"), (scale, "3")):
    try:
        option.scan(value)
    except OptionError as exc:
        end.add(option, exc.code, exc.argval)

print(scale.dval[: scale.count])               # [2.5]
print(out.basename[0], out.extension[0])       # report.txt .txt
print(format_errors(end, "prog"), end="")      # prog: excess option -s|--scale=3
```

`scan(None)` counts an occurrence without a value and leaves the stored
value as it was. `check()` raises `OptionError` with `ErrorCode.MINCOUNT`
when an option occurred fewer than `mincount` times.

## Dates

```python
from argtab.date import date1
from argtab.strptime import TimeStruct, strptime

tm = TimeStruct()
rest = strptime("12/31/04", "%D", tm)
assert rest == "" and (tm.tm_mon, tm.tm_mday, tm.tm_year) == (11, 31, 104)

when = date1(None, "time", "%H:%M", None, "time of day")
when.scan("23:59")
assert (when.tmval[0].tm_hour, when.tmval[0].tm_min) == (23, 59)
```

A value that does not match the whole format raises `OptionError` with
`ErrorCode.BADDATE`; its message shows the format applied to
1999-12-31 23:59:59.

## Scanning

```python
from argtab.getopt import ArgumentKind, LongOption, getopt_long

opts, operands = getopt_long(
    ["prog", "-v", "file", "--out=x"],
    "vo:",
    [LongOption("out", ArgumentKind.REQUIRED_ARGUMENT, "o")],
)
assert opts == [("v", None), ("o", "x")]
assert operands == ["file"]
```

`Getopt` can also be driven step by step with `next()`, which returns
`None` at the end; `optind`, `optarg`, `optopt` and `longindex` hold the
scanner's state. Error messages go to standard error unless `opterr` is
false or the option string starts with `:`; the last one is kept in
`errmsg`. Setting `POSIXLY_CORRECT` in the environment turns off
permutation.

## What the package does not do

There is no single function that runs a whole table of options against an
argument vector: the caller feeds values to each option's `scan`, calls
`check`, and collects `OptionError`s in an `End`. Only floating-point,
file and date options are provided; there are no integer, string, literal
or regular-expression options, and no generation of usage or help text.
The package has no command of its own.