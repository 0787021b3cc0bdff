"""Tests for the FastAPI analyze service.

WHY: HTTP clients rely on the analyze endpoint reporting the same
tokens, offsets and positions as the library, and on configuration
mistakes coming back as 400s rather than 500s.

HOW: Uses the FastAPI TestClient (synchronous, in-process).

RULES:
- Each test is independent; the app holds no per-request state
"""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from concat_between import __version__
from concat_between.config import ConfigError
from concat_between.server.app import app, serve


@pytest.fixture
def client():
    return TestClient(app)


class TestAnalyze:

    def test_default_options(self, client):
        resp = client.post("/analyze", json={"text": "one two three"})
        assert resp.status_code == 200
        body = resp.json()
        assert body == {
            "tokens": [{
                "token": "one two three",
                "start_offset": 0,
                "end_offset": 13,
                "type": "shingle",
                "position": 0,
                "position_length": 1,
            }],
            "final_offset": 13,
        }

    def test_marked_runs(self, client, marked_text):
        resp = client.post("/analyze", json={
            "text": marked_text,
            "options": {"startToken": "<concat>", "endToken": "</concat>"},
        })
        assert resp.status_code == 200
        tokens = resp.json()["tokens"]
        assert [t["token"] for t in tokens] == [
            "zero", "one", "two three", "four", "five six seven",
        ]
        assert [t["type"] for t in tokens] == ["word", "word", "shingle", "word", "shingle"]

    def test_empty_text(self, client):
        resp = client.post("/analyze", json={"text": ""})
        assert resp.status_code == 200
        assert resp.json() == {"tokens": [], "final_offset": 0}

    def test_unknown_option_is_400(self, client):
        resp = client.post("/analyze", json={"text": "a", "options": {"bogus": "1"}})
        assert resp.status_code == 400
        assert "Unknown parameters" in resp.json()["detail"]

    def test_invalid_handling_is_400(self, client):
        resp = client.post("/analyze", json={
            "text": "a", "options": {"startTokenHandling": "keep"},
        })
        assert resp.status_code == 400

    def test_unknown_filter_is_400(self, client):
        resp = client.post("/analyze", json={"text": "a", "filter": "nope"})
        assert resp.status_code == 400
        assert "Unknown filter" in resp.json()["detail"]

    def test_missing_text_is_422(self, client):
        resp = client.post("/analyze", json={})
        assert resp.status_code == 422


class TestFilters:

    def test_lists_concatenate_between(self, client):
        resp = client.get("/filters")
        assert resp.status_code == 200
        filters = resp.json()
        assert filters[0]["name"] == "concatenate_between"
        assert "startTokenHandling" in filters[0]["options"]


class TestHealth:

    def test_ok(self, client):
        resp = client.get("/health")
        assert resp.json() == {"status": "ok", "version": __version__}


class TestAnalyzeFormatted:

    def test_token_table_media_type(self, client):
        resp = client.post("/analyze/token_table", json={"text": "a b"})
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/tab-separated-values")
        assert resp.text.splitlines()[1] == "a b\t0\t3\t1\t1\tshingle"

    def test_token_json_media_type(self, client):
        resp = client.post("/analyze/token_json", json={
            "text": "one two | three", "options": {"startToken": "|"},
        })
        assert resp.headers["content-type"] == "application/json"
        assert [t["token"] for t in resp.json()["tokens"]] == ["one", "two", "three"]

    def test_unknown_format_is_404(self, client):
        resp = client.post("/analyze/yaml", json={"text": "a"})
        assert resp.status_code == 404
        assert "Unknown format 'yaml'" in resp.json()["detail"]

    def test_config_error_is_400(self, client):
        resp = client.post("/analyze/plain_text", json={"text": "a", "options": {"bogus": "1"}})
        assert resp.status_code == 400


class TestServe:

    def test_port_from_environment(self, monkeypatch):
        monkeypatch.setenv("CONCAT_PORT", "9200")
        with patch("concat_between.server.app.uvicorn.run") as run:
            serve()
        assert run.call_args.kwargs["port"] == 9200

    def test_bad_port_raises_before_starting(self, monkeypatch):
        monkeypatch.setenv("CONCAT_PORT", "http")
        with patch("concat_between.server.app.uvicorn.run") as run:
            with pytest.raises(ConfigError, match="CONCAT_PORT"):
                serve()
        run.assert_not_called()
