import logging

import pytest

from story_kit.observability import LoggingMetricsHook, NoOpMetricsHook, names
from story_kit.parsers.twee_parser import TweeParser


def test_noop_hook_accepts_all_calls() -> None:
    hook = NoOpMetricsHook()

    hook.record_latency(names.PARSE_DURATION, 1.0)
    hook.increment(names.PARSE_REQUESTS_TOTAL, labels={"format": "twee"})
    hook.record_gauge(names.DIFF_PASSAGES_CHANGED, 2)


def test_logging_hook_writes_metrics(caplog: pytest.LogCaptureFixture) -> None:
    hook = LoggingMetricsHook(level=logging.INFO)

    with caplog.at_level(logging.INFO, logger="story_kit.observability.base"):
        hook.record_latency(names.PARSE_DURATION, 12.5, {"format": "json"})
        hook.increment(names.PARSE_REQUESTS_TOTAL)
        hook.record_gauge(names.DIFF_PASSAGES_CHANGED, 3)

    assert caplog.messages == [
        "story_parse_duration=12.500ms {'format': 'json'}",
        "story_parse_requests_total+=1 {}",
        "story_diff_passages_changed=3 {}",
    ]


def test_logging_hook_with_parser(caplog: pytest.LogCaptureFixture) -> None:
    log = logging.getLogger("story_kit.tests.metrics")
    parser = TweeParser(metrics_hook=LoggingMetricsHook(log=log))

    with caplog.at_level(logging.DEBUG, logger="story_kit.tests.metrics"):
        parser.parse(":: Start\n[[End]]\n:: End\nDone.")

    assert any(m.startswith(names.PARSE_DURATION) for m in caplog.messages)
    assert "story_parse_passages_total+=2 {'format': 'twee'}" in caplog.messages
