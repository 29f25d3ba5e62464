"""Tests for event envelope construction."""

import re

import pytest

from ravenlite.conf import ClientOptions, build_endpoint, parse_dsn
from ravenlite.context import UserContext
from ravenlite.envelope import (
    build_auth_params,
    build_envelope,
    generate_event_id,
    utc_timestamp,
)
from ravenlite.stacktrace import parse_stack
from ravenlite.types import LogLevel, StackFrame

DSN = "https://abc@example.com:9000/sentry/42"

EVENT_ID_PATTERN = re.compile(r"^[0-9a-f]{12}4[0-9a-f]{3}[89ab][0-9a-f]{15}$")


def _build(platform, context, **kwargs):
    return build_envelope(
        build_endpoint(parse_dsn(DSN)),
        ClientOptions(dsn=DSN),
        platform,
        context,
        **kwargs,
    )


def _raise_nested():
    def inner():
        raise ValueError("inner failure")

    inner()


class TestEventId:
    def test_format(self):
        assert EVENT_ID_PATTERN.match(generate_event_id())

    def test_unique(self):
        first, second = generate_event_id(), generate_event_id()
        assert first != second
        assert EVENT_ID_PATTERN.match(first)
        assert EVENT_ID_PATTERN.match(second)


class TestTimestamp:
    def test_utc_millisecond_format(self):
        assert re.match(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$", utc_timestamp())


class TestAuthParams:
    def test_auth_params(self):
        auth = build_auth_params(parse_dsn(DSN), "ravenlite/0.1.0", "s3cret")
        assert auth == {
            "sentry_version": "7",
            "sentry_client": "ravenlite/0.1.0",
            "sentry_key": "abc",
            "sentry_secret": "s3cret",
        }

    def test_secret_defaults_to_empty(self):
        auth = build_auth_params(parse_dsn(DSN), "ravenlite/0.1.0")
        assert auth["sentry_secret"] == ""


class TestLogLevel:
    @pytest.mark.parametrize(
        "level,label",
        [
            (LogLevel.DEBUG, "debug"),
            (LogLevel.INFO, "info"),
            (LogLevel.WARNING, "warning"),
            (LogLevel.ERROR, "error"),
            (LogLevel.FATAL, "fatal"),
        ],
    )
    def test_serialized_label(self, platform, level, label):
        event = _build(platform, UserContext(), level=level, message="m")
        assert event.to_dict()["level"] == label

    def test_from_string(self):
        assert LogLevel("warning") is LogLevel.WARNING

    def test_from_logging(self):
        import logging

        assert LogLevel.from_logging(logging.CRITICAL) is LogLevel.FATAL
        assert LogLevel.from_logging(logging.ERROR) is LogLevel.ERROR
        assert LogLevel.from_logging(logging.WARNING) is LogLevel.WARNING
        assert LogLevel.from_logging(logging.INFO) is LogLevel.INFO
        assert LogLevel.from_logging(logging.DEBUG) is LogLevel.DEBUG
        assert LogLevel.from_logging(logging.NOTSET) is LogLevel.DEBUG


class TestMessageEnvelope:
    def test_shape(self, platform):
        event = _build(platform, UserContext(), level=LogLevel.INFO, message="hello")
        body = event.to_dict()

        assert EVENT_ID_PATTERN.match(body["event_id"])
        assert body["project"] == "42"
        assert body["level"] == "info"
        assert body["platform"] == "python"
        assert body["message"] == "hello"
        assert body["tags"] == {"uuid": "device-1234", "os_version": "17.2"}
        assert body["extra"] == {"orientation": "portrait"}
        assert "exception" not in body

    def test_extra_is_snapshot_with_orientation(self, platform):
        context = UserContext()
        context.replace({"user": "u1"})

        event = _build(platform, context, level=LogLevel.INFO, message="m")

        assert event.extra == {"user": "u1", "orientation": "portrait"}
        assert context.data == {"user": "u1"}

    def test_orientation_read_per_event(self, platform):
        context = UserContext()

        first = _build(platform, context, level=LogLevel.INFO, message="m")
        platform.current_orientation = "landscape"
        second = _build(platform, context, level=LogLevel.INFO, message="m")

        assert first.extra["orientation"] == "portrait"
        assert second.extra["orientation"] == "landscape"
        assert platform.orientation_reads == 2

    def test_context_replaced_not_merged(self, platform):
        context = UserContext()
        context.replace({"a": 1})
        context.replace({"b": 2})

        event = _build(platform, context, level=LogLevel.INFO, message="m")

        assert event.extra == {"b": 2, "orientation": "portrait"}

    def test_fresh_event_ids(self, platform):
        context = UserContext()
        first = _build(platform, context, level=LogLevel.INFO, message="m")
        second = _build(platform, context, level=LogLevel.INFO, message="m")
        assert first.event_id != second.event_id


class TestErrorEnvelope:
    def test_exception_entry(self, platform):
        try:
            _raise_nested()
        except ValueError as e:
            error = e

        event = _build(
            platform,
            UserContext(),
            level=LogLevel.ERROR,
            message=str(error),
            error=error,
            frames=parse_stack(error),
        )
        body = event.to_dict()

        assert body["level"] == "error"
        assert body["message"] == "inner failure"
        assert len(body["exception"]) == 1

        exc = body["exception"][0]
        assert exc["type"] == "ValueError"
        assert exc["value"] == "inner failure"

        functions = [f["function"] for f in exc["stacktrace"]["frames"]]
        assert functions == ["test_exception_entry", "_raise_nested", "inner"]

    def test_frames_are_reversed(self, platform):
        frames = [
            StackFrame(filename="a.py", abs_path="/a.py", lineno=3),
            StackFrame(filename="b.py", abs_path="/b.py", lineno=2),
            StackFrame(filename="c.py", abs_path="/c.py", lineno=1),
        ]
        error = RuntimeError("boom")

        event = _build(
            platform,
            UserContext(),
            level=LogLevel.ERROR,
            message="boom",
            error=error,
            frames=frames,
        )

        sent = event.to_dict()["exception"][0]["stacktrace"]["frames"]
        assert [f["filename"] for f in sent] == ["c.py", "b.py", "a.py"]
        assert [f["filename"] for f in frames] == ["a.py", "b.py", "c.py"]

    def test_unraised_exception_has_no_frames(self, platform):
        error = KeyError("missing")
        event = _build(
            platform,
            UserContext(),
            level=LogLevel.ERROR,
            message=str(error),
            error=error,
            frames=parse_stack(error),
        )
        assert event.to_dict()["exception"][0]["stacktrace"]["frames"] == []
