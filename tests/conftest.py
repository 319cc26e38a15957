import json

import pytest
import requests
from click.testing import CliRunner


def make_response(status_code, body=b"", url="http://codeprobs.test/"):
    """Real requests.Response with canned status and body."""
    response = requests.Response()
    response.status_code = status_code
    if not isinstance(body, (bytes, str)):
        body = json.dumps(body)
    if isinstance(body, str):
        body = body.encode("utf-8")
    response._content = body
    response.encoding = "utf-8"
    response.url = url
    return response


class FakeSession:
    """Stands in for requests.Session; replays queued responses."""

    def __init__(self):
        self.calls = []
        self.responses = []

    def queue(self, status_code, body=b""):
        self.responses.append(make_response(status_code, body))
        return self

    def fail_with(self, exc):
        self.responses.append(exc)
        return self

    def request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        if not self.responses:
            raise AssertionError(f"unexpected request: {method} {url}")
        result = self.responses.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture
def session(monkeypatch):
    """Fake session that every new CodeprobsClient picks up."""
    fake = FakeSession()
    monkeypatch.setattr(requests, "Session", lambda: fake)
    return fake


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def home(tmp_path, monkeypatch):
    """Isolated home directory for ~/.codeprobs.global."""
    path = tmp_path / "home"
    path.mkdir()
    monkeypatch.setenv("HOME", str(path))
    monkeypatch.delenv("CODEPROBS_SERVER", raising=False)
    return path


@pytest.fixture
def problem_dir(tmp_path, monkeypatch):
    """Current directory holding a marker for problem 42."""
    path = tmp_path / "problem"
    path.mkdir()
    (path / ".codeprob_info.json").write_text('{"id": 42}', encoding="utf-8")
    monkeypatch.chdir(path)
    return path
