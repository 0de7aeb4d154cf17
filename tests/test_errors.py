from leafcfg.errors import FormatError, ParseError, SettingsError, StorageError


def test_format_error_includes_key() -> None:
    err = FormatError("expected '#RRGGBBAA', got 'red'", key="ui.base")
    assert str(err) == "ui.base: expected '#RRGGBBAA', got 'red'"
    assert err.key == "ui.base"
    assert err.message == "ui.base: expected '#RRGGBBAA', got 'red'"
    assert isinstance(err, SettingsError)


def test_format_error_without_key() -> None:
    err = FormatError("bad value")
    assert str(err) == "bad value"
    assert err.key is None


def test_parse_error_wraps_exception() -> None:
    try:
        raise ValueError("bad parse")
    except ValueError as e:
        err = ParseError("Settings document is not valid JSON", e)
        assert str(err) == "Settings document is not valid JSON"
        assert err.original_error is e


def test_storage_error_is_an_os_error() -> None:
    cause = PermissionError("denied")
    err = StorageError("Unable to write file", "sdmc:/settings.json", cause)
    assert isinstance(err, OSError)
    assert isinstance(err, SettingsError)
    assert str(err) == "Unable to write file: sdmc:/settings.json"
    assert err.path == "sdmc:/settings.json"
    assert err.original_error is cause
