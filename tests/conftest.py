"""Shared fixtures for ravenlite tests."""

from __future__ import annotations

import pytest

import ravenlite.client as client_module
from ravenlite.conf import ClientOptions
from ravenlite.client import RavenClient
from ravenlite.device import PlatformInfo

DSN = "https://abc@example.com:9000/sentry/42"


class FakePlatform(PlatformInfo):
    """Platform with fixed, inspectable values."""

    def __init__(self) -> None:
        self.current_orientation = "portrait"
        self.orientation_reads = 0

    def device_id(self) -> str:
        return "device-1234"

    def os_version(self) -> str:
        return "17.2"

    def orientation(self) -> str:
        self.orientation_reads += 1
        return self.current_orientation


@pytest.fixture(autouse=True)
def reset_global_client():
    """Reset the process-wide client state around each test."""
    client_module._client = None
    client_module._user_context = {}
    yield
    client_module._client = None
    client_module._user_context = {}


@pytest.fixture
def platform() -> FakePlatform:
    return FakePlatform()


@pytest.fixture
def client(platform: FakePlatform) -> RavenClient:
    return RavenClient(ClientOptions(dsn=DSN, secret_key="s3cret"), platform=platform)
