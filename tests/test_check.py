import io

from tclib.check import Check, run_checks


def test_all_pass():
    err = io.StringIO()
    checks = [Check(lambda: True, "a"), Check(lambda: True, "b")]
    assert run_checks(checks, err) is True
    assert err.getvalue() == ""


def test_empty_list_passes():
    assert run_checks([], io.StringIO()) is True


def test_stops_at_first_failure():
    calls = []

    def record(name, result):
        def fn():
            calls.append(name)
            return result

        return fn

    err = io.StringIO()
    checks = [
        Check(record("a", True), "a"),
        Check(record("b", False), "b"),
        Check(record("c", True), "c"),
    ]
    assert run_checks(checks, err) is False
    assert calls == ["a", "b"]
    assert err.getvalue() == 'check "b" failed\n'


def test_missing_list_fails():
    err = io.StringIO()
    assert run_checks(None, err) is False
    assert "list of checks" in err.getvalue()