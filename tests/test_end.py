import io

import pytest

from argtab.end import End, ErrorCode, ErrorRecord, OptionError, format_errors, print_errors


class _Describer:
    def describe(self, error, argval, progname):
        return f"{progname}: {error.name} {argval}\n"


class _Silent:
    pass


def test_describe_limit():
    end = End(20)
    assert end.describe(ErrorCode.LIMIT, None, "prog") == "prog: too many errors to display\n"


def test_describe_malloc():
    end = End(20)
    assert end.describe(ErrorCode.MALLOC, None, "prog") == "prog: insufficient memory\n"


def test_describe_nomatch():
    end = End(20)
    assert end.describe(ErrorCode.NOMATCH, "foo", "prog") == 'prog: unexpected argument "foo"\n'


def test_describe_missing_argument():
    end = End(20)
    assert end.describe(ErrorCode.MISSARG, "--x", "prog") == 'prog: option "--x" requires an argument\n'


def test_describe_long_option():
    end = End(20)
    assert end.describe(ErrorCode.LONGOPT, "--zz", "prog") == 'prog: invalid option "--zz"\n'


@pytest.mark.parametrize("error", ["q", ord("q")])
def test_describe_short_option_character(error):
    end = End(20)
    assert end.describe(error, None, "prog") == 'prog: invalid option "-q"\n'


def test_describe_none_progname_and_argval():
    end = End(20)
    assert end.describe(ErrorCode.NOMATCH, None, None) == ': unexpected argument ""\n'


def test_add_and_iterate_records():
    end = End(5)
    parent = _Describer()
    end.add(parent, ErrorCode.BADINT, "abc")
    end.add(end, ErrorCode.NOMATCH, "extra")
    assert len(end) == 2
    assert end.count == 2
    assert list(end) == [
        ErrorRecord(parent, ErrorCode.BADINT, "abc"),
        ErrorRecord(end, ErrorCode.NOMATCH, "extra"),
    ]


def test_overflow_replaces_last_with_limit():
    end = End(2)
    end.add(end, ErrorCode.NOMATCH, "a")
    end.add(end, ErrorCode.NOMATCH, "b")
    end.add(end, ErrorCode.NOMATCH, "c")
    records = list(end)
    assert len(records) == 2
    assert records[0].argval == "a"
    assert records[-1] == ErrorRecord(end, ErrorCode.LIMIT, None)


def test_reset_clears_records():
    end = End(3)
    end.add(end, ErrorCode.NOMATCH, "a")
    end.reset()
    assert len(end) == 0
    assert format_errors(end, "prog") == ""


def test_end_header_fields():
    end = End(7)
    assert end.mincount == 1
    assert end.maxcount == 7


def test_format_errors_joins_messages_and_skips_silent_parents():
    end = End(10)
    end.add(end, ErrorCode.NOMATCH, "foo")
    end.add(_Silent(), ErrorCode.BADINT, "x")
    end.add(_Describer(), ErrorCode.BADDATE, "bar")
    text = format_errors(end, "prog")
    assert text == 'prog: unexpected argument "foo"\n' + "prog: BADDATE bar\n"


def test_print_errors_writes_to_stream():
    end = End(4)
    end.add(end, ErrorCode.LONGOPT, "--bad")
    stream = io.StringIO()
    print_errors(end, "prog", stream)
    assert stream.getvalue() == 'prog: invalid option "--bad"\n'


def test_print_errors_defaults_to_stdout(capsys):
    end = End(4)
    end.add(end, ErrorCode.MALLOC, None)
    print_errors(end, "prog")
    assert capsys.readouterr().out == "prog: insufficient memory\n"


def test_option_error_carries_code_and_value():
    err = OptionError(ErrorCode.BADDOUBLE, "1.2.3")
    assert err.code is ErrorCode.BADDOUBLE
    assert err.argval == "1.2.3"


def test_option_error_default_argval():
    err = OptionError(ErrorCode.MAXCOUNT)
    assert err.argval is None
    assert err.code is ErrorCode.MAXCOUNT