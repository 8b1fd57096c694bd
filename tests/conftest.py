# tests/conftest.py
import pytest
import requests

import address_geocoder.geocode.client as client_module

ENV_VARS = (
    "GOOGLE_MAPS_API_KEY",
    "GEOCODE_LOOKUP_TYPE",
    "GEOCODE_COUNTRY_CODE",
    "GEOCODE_URL",
    "GEOCODE_TIMEOUT",
)


# -------------------------
# Fake HTTP layer
# -------------------------
class FakeResponse:
    def __init__(self, payload=None, status_code=200, text=None):
        self.payload = payload
        self.status_code = status_code
        self.text = text

    def json(self):
        if self.text is not None:
            raise requests.exceptions.JSONDecodeError("Expecting value", self.text, 0)
        return self.payload


class FakeHTTP:
    """Stands in for requests.get / Session.get and records every call."""
    def __init__(self, response=None, exc=None):
        self.response = response if response is not None else FakeResponse({"status": "OK", "results": []})
        self.exc = exc
        self.calls = []

    def get(self, url, headers=None, timeout=None):
        self.calls.append({"url": url, "headers": headers, "timeout": timeout})
        if self.exc is not None:
            raise self.exc
        return self.response

    @property
    def last_url(self):
        return self.calls[-1]["url"]


# -------------------------
# Fixtures
# -------------------------
@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    # keep the developer's shell and any local .env out of the settings
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def fake_http(monkeypatch):
    fake = FakeHTTP()
    monkeypatch.setattr(client_module.requests, "get", fake.get)
    return fake
