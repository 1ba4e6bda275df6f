from __future__ import annotations

import logging

import pytest

from assertcore import AssertionContext, AssertionFailedError, Failures, config
from assertcore.descriptors import DescriptorKind, is_not_equal, is_null


class _Angled:
    def to_string(self, value):
        return f"<{value}>"


def test_shared_instance():
    assert Failures.instance() is Failures.instance()


def test_failure_builds_but_does_not_raise():
    error = Failures().failure(AssertionContext(), is_not_equal("foo", "bar"))

    assert isinstance(error, AssertionFailedError)
    assert isinstance(error, AssertionError)
    assert error.message == 'expected:<"bar"> but was:<"foo">'
    assert error.kind is DescriptorKind.NOT_EQUAL


def test_report_raises():
    with pytest.raises(AssertionFailedError, match="expected not null"):
        Failures().report(AssertionContext(), is_null())


class TestMessageFor:
    def setup_method(self):
        self.failures = Failures()
        self.descriptor = is_not_equal(1, 2)

    def test_descriptor_message(self):
        message = self.failures.message_for(AssertionContext(), self.descriptor)
        assert message == "expected:<2> but was:<1>"

    def test_description_prefix(self):
        ctx = AssertionContext(description="age")
        message = self.failures.message_for(ctx, self.descriptor)
        assert message == "[age] expected:<2> but was:<1>"

    def test_overriding_message_is_verbatim(self):
        ctx = AssertionContext(overriding_message="100% wrong: %s")
        message = self.failures.message_for(ctx, self.descriptor)
        assert message == "100% wrong: %s"

    def test_overriding_message_with_description(self):
        ctx = AssertionContext(
            description="name check", overriding_message="custom failure"
        )
        message = self.failures.message_for(ctx, self.descriptor)
        assert message == "[name check] custom failure"

    def test_empty_strings_count_as_unset(self):
        ctx = AssertionContext(description="", overriding_message="")
        message = self.failures.message_for(ctx, self.descriptor)
        assert message == "expected:<2> but was:<1>"

    def test_lazy_description(self):
        calls: list[int] = []

        def describe() -> str:
            calls.append(1)
            return "lazy"

        ctx = AssertionContext(description=describe)
        assert calls == []

        message = self.failures.message_for(ctx, self.descriptor)
        assert message == "[lazy] expected:<2> but was:<1>"
        assert calls == [1]

    def test_context_representation(self):
        ctx = AssertionContext(representation=_Angled())
        message = self.failures.message_for(ctx, self.descriptor)
        assert message == "expected:<<2>> but was:<<1>>"


def test_custom_error_type():
    class MyError(AssertionFailedError):
        pass

    with pytest.raises(MyError) as exc_info:
        Failures(MyError).report(AssertionContext(), is_null())

    assert exc_info.value.kind is DescriptorKind.NULL


def test_failures_logged_when_enabled(caplog: pytest.LogCaptureFixture):
    with (
        config.report_override({"log_failures": True}),
        caplog.at_level(logging.INFO, logger="assertcore.failures"),
    ):
        Failures().failure(AssertionContext(description="x"), is_not_equal(1, 2))

    assert [r.getMessage() for r in caplog.records] == [
        "Assertion failed (not_equal): [x] expected:<2> but was:<1>"
    ]


def test_failures_not_logged_by_default(caplog: pytest.LogCaptureFixture):
    with caplog.at_level(logging.DEBUG, logger="assertcore.failures"):
        Failures().failure(AssertionContext(), is_not_equal(1, 2))

    assert caplog.records == []
