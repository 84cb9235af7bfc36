"""Tests for logxi exceptions and traced errors."""

import json

import pytest

from logxi.errors import (
    ConfigurationError,
    LogxiError,
    TracedError,
    qualified_name,
    safe_str,
)
from logxi.stack import caller


class TestLogxiError:
    """Test the base exception."""

    def test_message_and_details(self) -> None:
        err = LogxiError("bad", details={"key": "value"})
        assert str(err) == "bad"
        assert err.message == "bad"
        assert err.details == {"key": "value"}

    def test_details_default(self) -> None:
        assert LogxiError("bad").details == {}

    def test_configuration_error_is_logxi_error(self) -> None:
        assert issubclass(ConfigurationError, LogxiError)


class TestTracedError:
    """Test stack-annotated errors."""

    def test_new_starts_at_caller(self) -> None:
        here = caller(0)
        err = TracedError.new("boom")
        assert err.frames[0].function == "test_new_starts_at_caller"
        assert err.frames[0].lineno == here.lineno + 1
        assert err.err is None
        assert err.describe() == "boom"

    def test_wrap_keeps_cause(self) -> None:
        cause = ValueError("bad value")
        err = TracedError.wrap(cause)
        assert err.err is cause
        assert err.__cause__ is cause
        assert err.message == "bad value"
        assert err.describe() == "ValueError: bad value"
        assert err.frames[0].function == "test_wrap_keeps_cause"

    def test_wrap_skip(self) -> None:
        def helper() -> TracedError:
            return TracedError.wrap(ValueError("x"), skip=2)

        assert helper().frames[0].function == "test_wrap_skip"

    def test_wrap_is_idempotent(self) -> None:
        err = TracedError.new("boom")
        assert TracedError.wrap(err) is err
        assert TracedError.from_exception(err) is err

    def test_from_exception_uses_raise_site(self) -> None:
        def fail() -> None:
            raise RuntimeError("exploded")

        try:
            fail()
        except RuntimeError as e:
            err = TracedError.from_exception(e)

        assert [frame.function for frame in err.frames] == ["fail", "test_from_exception_uses_raise_site"]

    def test_from_exception_without_traceback(self) -> None:
        err = TracedError.from_exception(ValueError("never raised"))
        assert err.frames == ()

    def test_qualified_type_name(self) -> None:
        err = TracedError.wrap(json.JSONDecodeError("bad json", "{", 0))
        assert err.type_name == "json.decoder.JSONDecodeError"

    def test_stack_rendering(self) -> None:
        err = TracedError.new("boom")
        first = err.frames[0]
        assert err.stack().startswith(f"{first}\n\t{first.source}\n")
        assert err.stack().endswith("\n")

    def test_can_be_raised(self) -> None:
        with pytest.raises(TracedError, match="boom"):
            raise TracedError.new("boom")


class TestHelpers:
    """Test rendering helpers."""

    def test_qualified_name_builtin(self) -> None:
        assert qualified_name(KeyError) == "KeyError"

    def test_safe_str(self) -> None:
        assert safe_str(3) == "3"
        assert safe_str(None) == "None"

    def test_safe_str_failure(self) -> None:
        class Broken:
            def __str__(self) -> str:
                raise ValueError("no")

        assert safe_str(Broken()) == "!Broken(ValueError('no'))"
