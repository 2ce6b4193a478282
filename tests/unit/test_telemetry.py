import pytest

from comprehend_demo.telemetry import (
    SimpleReporter,
    TelemetryContext,
    TelemetryReporter,
    telemetry_enabled,
)


@pytest.mark.unit
def test_disabled_by_default_returns_shared_no_op():
    ctx = TelemetryContext(SimpleReporter())

    assert ctx is TelemetryContext()
    with ctx("anything") as scoped:
        scoped.count("ignored")


@pytest.mark.unit
@pytest.mark.parametrize("var", ["COMPREHEND_TELEMETRY", "DEBUG"])
def test_enabled_through_environment(monkeypatch, var):
    monkeypatch.setenv(var, "1")

    assert telemetry_enabled()


@pytest.mark.unit
def test_enabled_without_reporters_is_still_no_op(monkeypatch):
    monkeypatch.setenv("COMPREHEND_TELEMETRY", "1")

    assert TelemetryContext() is TelemetryContext()


@pytest.mark.unit
def test_nested_scopes_and_metrics(monkeypatch):
    monkeypatch.setenv("COMPREHEND_TELEMETRY", "1")
    reporter = SimpleReporter()
    tele = TelemetryContext(reporter)

    with tele("run"), tele("analysis.pii") as ctx:
        ctx.count("analysis.error", operation="pii")

    assert set(reporter.timings) == {"run", "run.analysis.pii"}
    [(duration, meta)] = reporter.timings["run.analysis.pii"]
    assert duration >= 0
    assert meta["depth"] == 1
    [(value, meta)] = reporter.metrics["run.analysis.pii.analysis.error"]
    assert value == 1
    assert meta == {"metric_type": "counter", "operation": "pii"}


@pytest.mark.unit
def test_failing_reporter_does_not_break_the_scope(monkeypatch, caplog):
    monkeypatch.setenv("COMPREHEND_TELEMETRY", "1")

    class Broken:
        def record_timing(self, scope, duration, **metadata):
            raise RuntimeError("reporter down")

        def record_metric(self, scope, value, **metadata):
            raise RuntimeError("reporter down")

    assert isinstance(Broken(), TelemetryReporter)
    tele = TelemetryContext(Broken())

    with tele("scope") as ctx:
        ctx.metric("m", 1)

    assert "Telemetry reporter 'Broken' failed" in caplog.text


@pytest.mark.unit
def test_empty_scope_name_rejected(monkeypatch):
    monkeypatch.setenv("COMPREHEND_TELEMETRY", "1")
    tele = TelemetryContext(SimpleReporter())

    with pytest.raises(ValueError, match="non-empty"), tele(""):
        pass


@pytest.mark.unit
def test_report_lists_timings_and_metrics(monkeypatch):
    monkeypatch.setenv("COMPREHEND_TELEMETRY", "1")
    reporter = SimpleReporter()
    tele = TelemetryContext(reporter)
    for _ in range(2):
        with tele("analysis.syntax"):
            pass
    tele.count("analysis.error")

    report = reporter.get_report()

    assert report.startswith("=== Telemetry Report ===")
    assert "analysis.syntax" in report
    assert "Calls: 2" in report
    assert "--- Metrics ---" in report
    assert "Total: 1" in report
