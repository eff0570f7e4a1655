from __future__ import annotations

import json

import pytest
import requests

from hn_scraper import run_scrape
from hn_scraper.errors import PageFetchError
from hn_scraper.hn_crawler import HackerNewsCrawler
from hn_scraper.models import Post


@pytest.fixture
def fetch_calls(monkeypatch):
    calls: list[int] = []

    def _fake_fetch_posts(self, n):
        calls.append(n)
        return [
            Post(title=f"Story {i}", uri=f"https://example.com/{i}", rank=i, author="bob", points=1)
            for i in range(1, n + 1)
        ]

    monkeypatch.setattr(HackerNewsCrawler, "fetch_posts", _fake_fetch_posts)
    return calls


def test_zero_posts_prints_empty_array(fetch_calls, capsys):
    assert run_scrape.main(["--posts", "0"]) == 0
    assert capsys.readouterr().out.strip() == "[]"
    assert fetch_calls == []


def test_default_is_30_posts(fetch_calls, capsys):
    assert run_scrape.main([]) == 0
    assert fetch_calls == [30]
    assert len(json.loads(capsys.readouterr().out)) == 30


def test_large_request_is_clamped(fetch_calls, capsys):
    assert run_scrape.main(["--posts", "500"]) == 0
    assert fetch_calls == [100]


def test_output_omits_absent_fields(fetch_calls, capsys):
    assert run_scrape.main(["--posts", "2"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out[0] == {"title": "Story 1", "uri": "https://example.com/1", "rank": 1, "author": "bob", "points": 1}
    assert "comments" not in out[1]


@pytest.mark.parametrize("value", ["abc", "-1", "1.5"])
def test_bad_post_count_is_usage_error(value, fetch_calls, capsys):
    with pytest.raises(SystemExit) as exc_info:
        run_scrape.main(["--posts", value])
    assert exc_info.value.code == 2
    assert fetch_calls == []
    assert capsys.readouterr().out == ""


def test_fetch_failure_exits_non_zero_without_output(monkeypatch, capsys):
    def _failing_fetch_posts(self, n):
        raise PageFetchError(2, requests.ConnectionError("boom"))

    monkeypatch.setattr(HackerNewsCrawler, "fetch_posts", _failing_fetch_posts)

    assert run_scrape.main(["--posts", "50"]) == 1
    assert capsys.readouterr().out == ""


def test_fetch_failure_is_reported_even_when_logging_is_quiet(monkeypatch, capsys):
    def _failing_fetch_posts(self, n):
        raise PageFetchError(2, requests.ConnectionError("boom"))

    monkeypatch.setattr(HackerNewsCrawler, "fetch_posts", _failing_fetch_posts)

    assert run_scrape.main(["--posts", "50", "--log-level", "critical"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "page 2" in captured.err
    assert "boom" in captured.err


def test_log_level_is_case_insensitive(fetch_calls, capsys):
    assert run_scrape.main(["--posts", "0", "--log-level", "debug"]) == 0
    assert capsys.readouterr().out.strip() == "[]"


def test_unknown_log_level_is_usage_error(fetch_calls, capsys):
    with pytest.raises(SystemExit) as exc_info:
        run_scrape.main(["--posts", "0", "--log-level", "verbose"])
    assert exc_info.value.code == 2
    assert capsys.readouterr().out == ""


def test_unknown_log_level_setting_is_usage_error(monkeypatch, fetch_calls, capsys):
    monkeypatch.setenv("HN_LOG_LEVEL", "verbose")
    with pytest.raises(SystemExit) as exc_info:
        run_scrape.main(["--posts", "0"])
    assert exc_info.value.code == 2
    assert "HN_LOG_LEVEL" in capsys.readouterr().err
