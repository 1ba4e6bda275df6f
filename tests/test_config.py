from __future__ import annotations

import json
import logging

import pytest

from assertcore import AssertionContext, AssertionFailedError, Objects, config


def test_defaults():
    assert config.max_length() == 0
    assert config.array_summary_threshold() == 100
    assert not config.pretty_enabled()
    assert not config.log_failures_enabled()
    assert config.config() == {}


def test_override_render():
    with config.render_override({"max_length": 20}):
        assert config.max_length() == 20
        # Unset options keep their defaults
        assert config.array_summary_threshold() == 100
    assert config.max_length() == 0


def test_override_nested():
    with config.render_override({"max_length": 20}):
        with config.render_override({"max_length": 5}):
            assert config.max_length() == 5
        assert config.max_length() == 20


def test_override_root_is_inherited():
    with config.override({"render": {"pretty": True}, "report": {"log_failures": True}}):
        assert config.pretty_enabled()
        assert config.log_failures_enabled()

        # A child override replaces only its own portion
        with config.render_override({"max_length": 3}):
            assert not config.pretty_enabled()
            assert config.log_failures_enabled()


def test_set_and_inherit_again():
    config.set({"log_failures": True}, "report")
    assert config.log_failures_enabled()

    config.set(None, "report")
    assert not config.log_failures_enabled()


def test_node_repr():
    assert repr(config.node("render")) == "<ConfigNode 'render' config={}>"


class TestEnvironment:
    def test_individual_variables(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("ASSERTCORE_MAX_LENGTH", "40")
        monkeypatch.setenv("ASSERTCORE_ARRAY_SUMMARY_THRESHOLD", "7")
        monkeypatch.setenv("ASSERTCORE_PRETTY", "yes")
        monkeypatch.setenv("ASSERTCORE_LOG_FAILURES", "1")

        assert config.max_length() == 40
        assert config.array_summary_threshold() == 7
        assert config.pretty_enabled()
        assert config.log_failures_enabled()

    def test_json_config(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv(
            "ASSERTCORE_CONFIG",
            json.dumps({"render": {"max_length": 12}, "report": {"log_failures": True}}),
        )

        assert config.max_length() == 12
        assert config.log_failures_enabled()

    def test_comma_separated_config(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv(
            "ASSERTCORE_CONFIG", "render.max_length=30, render.pretty=true"
        )

        assert config.max_length() == 30
        assert config.pretty_enabled()

    def test_individual_variables_win(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("ASSERTCORE_CONFIG", "render.max_length=30")
        monkeypatch.setenv("ASSERTCORE_MAX_LENGTH", "10")

        assert config.max_length() == 10

    def test_override_beats_environment(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("ASSERTCORE_MAX_LENGTH", "10")

        with config.render_override({"max_length": 50}):
            assert config.max_length() == 50
        assert config.max_length() == 10

    def test_invalid_value_is_ignored(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ):
        monkeypatch.setenv("ASSERTCORE_MAX_LENGTH", "lots")

        with caplog.at_level(logging.WARNING, logger="assertcore.config"):
            assert config.max_length() == 0

        assert "Ignoring invalid value 'lots'" in caplog.text

    def test_unknown_option_is_ignored(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ):
        monkeypatch.setenv("ASSERTCORE_CONFIG", "render.colour=red,render.max_length=9")

        with caplog.at_level(logging.WARNING, logger="assertcore.config"):
            assert config.max_length() == 9

        assert "Ignoring unknown option 'render.colour'" in caplog.text

    def test_broken_json_is_ignored(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ):
        monkeypatch.setenv("ASSERTCORE_CONFIG", "{not json")

        with caplog.at_level(logging.WARNING, logger="assertcore.config"):
            assert config.config() == {}

        assert "Could not parse ASSERTCORE_CONFIG" in caplog.text

    def test_wrong_typed_json_values_are_ignored(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ):
        monkeypatch.setenv(
            "ASSERTCORE_CONFIG",
            json.dumps(
                {
                    "render": {"max_length": "80", "pretty": "false"},
                    "report": {"log_failures": 1},
                }
            ),
        )

        with caplog.at_level(logging.WARNING, logger="assertcore.config"):
            assert config.max_length() == 0
            assert config.pretty_enabled() is False
            assert config.log_failures_enabled() is False

        assert "Ignoring invalid value '80' for option 'render.max_length'" in caplog.text
        assert "Ignoring invalid value 'false' for option 'render.pretty'" in caplog.text
        assert "Ignoring invalid value 1 for option 'report.log_failures'" in caplog.text

    def test_json_keeps_valid_values_next_to_invalid_ones(
        self, monkeypatch: pytest.MonkeyPatch
    ):
        monkeypatch.setenv(
            "ASSERTCORE_CONFIG",
            json.dumps({"render": {"max_length": True, "array_summary_threshold": 5}}),
        )

        assert config.max_length() == 0
        assert config.array_summary_threshold() == 5

    def test_json_feature_must_be_an_object(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ):
        monkeypatch.setenv("ASSERTCORE_CONFIG", json.dumps({"render": 80, "colour": {}}))

        with caplog.at_level(logging.WARNING, logger="assertcore.config"):
            assert config.config() == {}

        assert "Ignoring invalid value 80 for feature 'render'" in caplog.text

    def test_bad_json_config_does_not_break_assertions(
        self, monkeypatch: pytest.MonkeyPatch
    ):
        monkeypatch.setenv("ASSERTCORE_CONFIG", json.dumps({"render": {"max_length": "80"}}))

        with pytest.raises(AssertionFailedError, match=r"^expected:<2> but was:<1>$"):
            Objects.instance().assert_equal(AssertionContext(), 1, 2)
