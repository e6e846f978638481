import pytest

from micaview.result import OK, ErrorType, Result, SourceLocation, capture_location


def _helper_location():
    return capture_location(1)


def test_ok_is_truthy_without_message():
    result = Result(True, None, ErrorType.NONE)
    assert bool(result) is True
    assert result.message is None
    assert result.error_type is ErrorType.NONE
    assert result.should_exit is False
    assert bool(OK) is True
    assert OK.message is None
    assert OK.error_type is ErrorType.NONE
    assert OK.should_exit is False


def test_failure_is_falsy():
    result = Result(False, "Erro desconhecido", ErrorType.CONSOLE_ERROR)
    assert not result
    assert result.message == "Erro desconhecido"


def test_truthiness_follows_success_flag():
    assert Result(True, "Info", ErrorType.MSGBOX_OK)
    assert not Result(False, "Aviso", ErrorType.MSGBOX_WARNING, should_exit=True)


def test_source_location_format():
    loc = SourceLocation("src/main.cpp", 42, "MyFunction")
    assert loc.format() == "[src/main.cpp:42 in MyFunction] "


def test_capture_location_depth_zero_is_caller():
    loc = capture_location()
    assert loc.function == "test_capture_location_depth_zero_is_caller"
    assert loc.file == __file__
    assert loc.line > 0


def test_capture_location_depth_one_skips_helper():
    loc = _helper_location()
    assert loc.function == "test_capture_location_depth_one_skips_helper"
    assert loc.file == __file__


def test_capture_location_negative_depth():
    with pytest.raises(ValueError):
        capture_location(-1)


def test_capture_location_too_deep():
    with pytest.raises(ValueError):
        capture_location(100000)


def test_error_type_channels_on_results():
    dialog = Result(False, "x", ErrorType.MSGBOX_ERROR)
    console = Result(False, "x", ErrorType.CONSOLE_WARNING)
    silent = Result(True, None, ErrorType.NONE)
    assert dialog.error_type.is_dialog is True
    assert dialog.error_type.is_console is False
    assert console.error_type.is_console is True
    assert silent.error_type.is_dialog is False
    assert silent.error_type.is_console is False


def test_result_is_immutable():
    result = Result(False, "x", ErrorType.CONSOLE_ERROR)
    with pytest.raises(AttributeError):
        result.success = True  # type: ignore[misc]
    assert result.success is False