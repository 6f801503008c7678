"""
Tests of `scotland_covid19.fetching`
"""

from __future__ import annotations

import re

import pytest
import requests

import scotland_covid19.fetching
from scotland_covid19.exceptions import NetworkFailureError
from scotland_covid19.fetching import GitHubSource


class FakeResponse:
    def __init__(self, content=b"", json_data=None, status_code=200):
        self.content = content
        self._json_data = json_data
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:  # noqa: PLR2004
            raise requests.HTTPError(f"{self.status_code} Error")

    def json(self):
        if self._json_data is None:
            raise ValueError("No JSON")

        return self._json_data


@pytest.fixture
def requests_get(monkeypatch):
    calls = []
    responses = {}

    def fake_get(url, timeout):
        calls.append((url, timeout))
        response = responses[url]
        if isinstance(response, Exception):
            raise response

        return response

    monkeypatch.setattr(scotland_covid19.fetching.requests, "get", fake_get)

    return calls, responses


def test_fetch_file(tmp_path, requests_get):
    calls, responses = requests_get
    source = GitHubSource(files_url="https://example.com/data", timeout=5.0)
    responses["https://example.com/data/cases.csv"] = FakeResponse(
        content=b"Date,Fife\n"
    )

    res = source.fetch_file("cases.csv", tmp_path / "data")

    assert res == tmp_path / "data" / "cases.csv"
    assert res.read_bytes() == b"Date,Fife\n"
    assert calls == [("https://example.com/data/cases.csv", 5.0)]
    assert not (tmp_path / "data" / "cases.csv.part").exists()


def test_fetch_file_existing(tmp_path, requests_get):
    calls, responses = requests_get
    source = GitHubSource(files_url="https://example.com/data")
    (tmp_path / "cases.csv").write_text("old")
    responses["https://example.com/data/cases.csv"] = FakeResponse(content=b"new")

    res = source.fetch_file("cases.csv", tmp_path)

    assert res.read_text() == "old"
    assert not calls

    res = source.fetch_file("cases.csv", tmp_path, force=True)

    assert res.read_text() == "new"
    assert len(calls) == 1


@pytest.mark.parametrize(
    "response, exp_msg",
    (
        pytest.param(FakeResponse(status_code=404), "404 Error", id="http-error"),
        pytest.param(
            requests.ConnectionError("refused"), "refused", id="connection-error"
        ),
        pytest.param(requests.Timeout("too slow"), "too slow", id="timeout"),
    ),
)
def test_fetch_file_failure(tmp_path, requests_get, response, exp_msg):
    _, responses = requests_get
    source = GitHubSource(files_url="https://example.com/data")
    responses["https://example.com/data/cases.csv"] = response

    with pytest.raises(
        NetworkFailureError,
        match=re.escape(
            f"Failed to retrieve https://example.com/data/cases.csv: {exp_msg}"
        ),
    ):
        source.fetch_file("cases.csv", tmp_path)

    assert not (tmp_path / "cases.csv").exists()


def test_fetch_latest_revision(requests_get):
    calls, responses = requests_get
    source = GitHubSource(latest_commit_url="https://example.com/commit")
    responses["https://example.com/commit"] = FakeResponse(
        json_data={"sha": "abc123", "commit": {}}
    )

    assert source.fetch_latest_revision() == "abc123"
    assert len(calls) == 1


@pytest.mark.parametrize(
    "response, exp_msg",
    (
        pytest.param(FakeResponse(status_code=500), "500 Error", id="http-error"),
        pytest.param(
            FakeResponse(json_data={"message": "hi"}),
            "unexpected response",
            id="no-sha",
        ),
        pytest.param(FakeResponse(), "unexpected response", id="not-json"),
    ),
)
def test_fetch_latest_revision_failure(requests_get, response, exp_msg):
    _, responses = requests_get
    source = GitHubSource(latest_commit_url="https://example.com/commit")
    responses["https://example.com/commit"] = response

    with pytest.raises(NetworkFailureError, match=re.escape(exp_msg)):
        source.fetch_latest_revision()


def test_default_urls():
    source = GitHubSource()

    assert source.files_url == (
        "https://raw.githubusercontent.com/watty62/Scot_covid19/master/data/processed"
    )
    assert source.latest_commit_url == (
        "https://api.github.com/repos/watty62/Scot_covid19/commits/master"
    )
