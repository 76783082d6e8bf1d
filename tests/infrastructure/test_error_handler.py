import json

import pytest

from types import SimpleNamespace

from spotlog.infrastructure.error_handler import (
    SpotlogError,
    WorkingDirectoryError,
    LogFileError,
    LogFileNotFoundError,
    SerializationError,
    CallerResolutionError,
    PanicAbort,
    handle_io_error,
)


# ---- Helpers ---------------------------------------------------------------

def raise_exc(exc: BaseException):
    def _fn(*args, **kwargs):
        raise exc
    return _fn


# ---- Exception classes -----------------------------------------------------

def test_spotlog_error_message_and_original():
    original = OSError("boom")
    err = SpotlogError("failed", original)
    assert err.message == "failed"
    assert err.original_error is original
    assert "failed" in str(err)
    assert "Original: boom" in str(err)


@pytest.mark.parametrize("exc_cls", [
    WorkingDirectoryError,
    LogFileError,
    LogFileNotFoundError,
    SerializationError,
    CallerResolutionError,
])
def test_specific_errors_store_message(exc_cls):
    err = exc_cls("msg")
    assert err.message == "msg"
    assert str(err) == "msg"
    assert isinstance(err, SpotlogError)


def test_not_found_is_a_log_file_error():
    assert issubclass(LogFileNotFoundError, LogFileError)


def test_panic_abort_bypasses_exception_handlers():
    assert issubclass(PanicAbort, BaseException)
    assert not issubclass(PanicAbort, Exception)
    assert PanicAbort("block").output == "block"


# ---- handle_io_error decorator ---------------------------------------------

def test_handle_io_error_wraps_os_error():
    fn = handle_io_error("write to the log file")(raise_exc(PermissionError("denied")))

    with pytest.raises(LogFileError) as info:
        fn()

    assert info.value.message == "Unable to write to the log file"
    assert isinstance(info.value.original_error, PermissionError)


def test_handle_io_error_wraps_encoding_errors():
    @handle_io_error("serialize the log record")
    def fn():
        return json.dumps({"value": object()})

    with pytest.raises(SerializationError):
        fn()


def test_handle_io_error_wraps_value_error():
    fn = handle_io_error("read the log file")(raise_exc(ValueError("bad json")))

    with pytest.raises(SerializationError):
        fn()


def test_handle_io_error_passes_spotlog_errors_through():
    original = LogFileNotFoundError("missing")
    fn = handle_io_error("find the log file")(raise_exc(original))

    with pytest.raises(LogFileNotFoundError) as info:
        fn()

    assert info.value is original


def test_handle_io_error_leaves_other_errors_alone():
    fn = handle_io_error("write")(raise_exc(KeyError("k")))

    with pytest.raises(KeyError):
        fn()


def test_handle_io_error_returns_value():
    calls = SimpleNamespace(n=0)

    @handle_io_error("write")
    def fn(value):
        calls.n += 1
        return value * 2

    assert fn(21) == 42
    assert calls.n == 1
    assert fn.__name__ == "fn"
