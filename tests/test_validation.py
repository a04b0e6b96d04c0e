import pytest

from trademe.validation import missing_keys, validate_required


class Failed(Exception):
    pass


def fail(required_keys):
    raise Failed(required_keys)


REQUIRED = ["b", "a", "c"]


def test_all_present_returns_none():
    assert validate_required(REQUIRED, {"a": 1, "b": 2, "c": 3, "d": 4}, fail) is None


def test_empty_values_count_as_present():
    assert validate_required(REQUIRED, {"a": "", "b": None, "c": []}, fail) is None


@pytest.mark.parametrize("params", [{}, {"a": 1}, {"a": 1, "b": 2}, {"c": 3, "d": 4}])
def test_missing_key_reports_every_required_key_in_order(params):
    with pytest.raises(Failed) as excinfo:
        validate_required(REQUIRED, params, fail)

    assert excinfo.value.args[0] == ["b", "a", "c"]


def test_handler_not_called_on_success():
    calls = []
    validate_required(["x"], {"x": 1}, calls.append)
    assert calls == []


def test_missing_keys_keeps_required_order():
    assert missing_keys(REQUIRED, {"a": 1}) == ["b", "c"]
    assert missing_keys(REQUIRED, {"a": 1, "b": 1, "c": 1}) == []
