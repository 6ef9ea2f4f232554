import pytest

from argtab.date import DateOption, date0, date1, daten
from argtab.end import ErrorCode, OptionError


@pytest.fixture
def table():
    a = date1(None, None, "%H:%M", None, "time 23:59")
    b = date0("b", None, "%Y-%m-%d", None, "date YYYY-MM-DD")
    c = daten(None, "date", "%D", None, 1, 2, "MM/DD/YY")
    return a, b, c


def _fields(tm):
    return (tm.tm_sec, tm.tm_min, tm.tm_hour, tm.tm_mday, tm.tm_mon,
            tm.tm_year, tm.tm_wday, tm.tm_yday, tm.tm_isdst)


def test_basic_001(table):
    a, b, c = table
    a.scan("23:59")
    c.scan("12/31/04")
    for option in table:
        option.check()
    assert a.count == 1
    assert _fields(a.tmval[0]) == (0, 59, 23, 0, 0, 0, 0, 0, 0)
    assert b.count == 0
    assert c.count == 1
    assert _fields(c.tmval[0]) == (0, 0, 0, 31, 11, 104, 0, 0, 0)


def test_basic_003(table):
    a, b, c = table
    c.scan("12/31/04")
    a.scan("20:15")
    c.scan("06/07/84")
    assert a.count == 1
    assert (a.tmval[0].tm_hour, a.tmval[0].tm_min) == (20, 15)
    assert c.count == 2
    assert _fields(c.tmval[0]) == (0, 0, 0, 31, 11, 104, 0, 0, 0)
    assert _fields(c.tmval[1]) == (0, 0, 0, 7, 5, 84, 0, 0, 0)


def test_basic_004(table):
    a, b, c = table
    c.scan("12/31/04")
    a.scan("20:15")
    b.scan("1982-11-28")
    c.scan("06/07/84")
    assert b.count == 1
    assert _fields(b.tmval[0]) == (0, 0, 0, 28, 10, 82, 0, 0, 0)
    assert c.count == 2


def test_basic_005_missing_required(table):
    a, b, c = table
    with pytest.raises(OptionError) as exc_a:
        a.check()
    assert exc_a.value.code is ErrorCode.MINCOUNT
    b.check()
    assert b.count == 0
    with pytest.raises(OptionError) as exc_c:
        c.check()
    assert exc_c.value.code is ErrorCode.MINCOUNT


def test_basic_006_bad_time(table):
    a, _, _ = table
    with pytest.raises(OptionError) as exc:
        a.scan("25:59")
    assert exc.value.code is ErrorCode.BADDATE
    assert exc.value.argval == "25:59"
    assert a.count == 0


def test_basic_007_bad_day(table):
    _, _, c = table
    with pytest.raises(OptionError) as exc:
        c.scan("12/32/04")
    assert exc.value.code is ErrorCode.BADDATE
    assert c.count == 0


def test_basic_008_excess_positional(table):
    a, _, _ = table
    a.scan("23:59")
    with pytest.raises(OptionError) as exc:
        a.scan("22:58")
    assert exc.value.code is ErrorCode.MAXCOUNT
    assert a.count == 1


def test_basic_009_second_value_bad(table):
    _, _, c = table
    c.scan("12/31/04")
    with pytest.raises(OptionError) as exc:
        c.scan("26/07/84")
    assert exc.value.code is ErrorCode.BADDATE
    assert c.count == 1


def test_basic_010_optional_twice(table):
    _, b, _ = table
    b.scan("1982-11-28")
    with pytest.raises(OptionError) as exc:
        b.scan("1976-11-11")
    assert exc.value.code is ErrorCode.MAXCOUNT
    assert b.tmval[0].tm_year == 82


def test_trailing_text_rejected():
    option = date1(None, None, "%H:%M", None, None)
    with pytest.raises(OptionError) as exc:
        option.scan("23:59x")
    assert exc.value.code is ErrorCode.BADDATE


def test_failed_scan_leaves_value_untouched():
    option = date1(None, None, "%H:%M", None, None)
    with pytest.raises(OptionError):
        option.scan("12:99")
    assert _fields(option.tmval[0]) == (0, 0, 0, 0, 0, 0, 0, 0, 0)


def test_scan_without_value_counts():
    option = date0("t", None, "%H:%M", None, None)
    option.scan(None)
    assert option.count == 1
    assert option.tmval[0].tm_hour == 0


def test_defaults():
    option = DateOption("d", None, None, None, 2, 1, None)
    assert option.format == "%x"
    assert option.datatype == "%x"
    assert option.maxcount == 2
    assert len(option.tmval) == 2


def test_default_format_parses_month_day_year():
    option = date1("d", None, None, "<date>", None)
    option.scan("02/29/00")
    assert option.datatype == "<date>"
    assert (option.tmval[0].tm_mon, option.tmval[0].tm_mday, option.tmval[0].tm_year) == (1, 29, 100)


def test_reset():
    option = daten(None, "date", "%D", None, 0, 2, None)
    option.scan("12/31/04")
    option.reset()
    assert option.count == 0
    option.scan("06/07/84")
    assert option.tmval[0].tm_mday == 7


def test_describe_bad_date():
    option = date1(None, None, "%H:%M", None, None)
    message = option.describe(ErrorCode.BADDATE, "25:59", "prog")
    assert message == 'prog: illegal timestamp format "25:59"\ncorrect format is "00:00"\n'


def test_describe_missing_and_excess():
    option = daten(None, "date", "%D", None, 1, 2, None)
    assert option.describe(ErrorCode.MINCOUNT, None, "prog") == "prog: missing option --date=%D\n"
    assert option.describe(ErrorCode.MAXCOUNT, "01/01/01", "prog") == (
        "prog: excess option --date=01/01/01\n"
    )