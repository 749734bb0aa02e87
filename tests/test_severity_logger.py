# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Tests for the severity-filtering logger."""

import itertools

import pytest

from severity_logging import Logger, MemoryLineSink, Severity, SeverityLogger

EMITTERS = {
    Severity.DEBUG: "debug",
    Severity.INFO: "info",
    Severity.WARNING: "warning",
    Severity.ERROR: "error",
    Severity.FATAL: "fatal",
}

QUERIES = {
    Severity.DEBUG: "is_debug_enabled",
    Severity.INFO: "is_info_enabled",
    Severity.WARNING: "is_warning_enabled",
    Severity.ERROR: "is_error_enabled",
    Severity.FATAL: "is_fatal_enabled",
}

ALL_PAIRS = list(itertools.product(Severity, Severity))


@pytest.fixture
def sink():
    return MemoryLineSink()


class TestFiltering:
    """Tests for threshold filtering."""

    @pytest.mark.parametrize("severity,threshold", ALL_PAIRS)
    def test_emits_iff_at_or_above_threshold(self, sink, severity, threshold):
        """Test that a call produces a line exactly when severity >= threshold."""
        logger = SeverityLogger(threshold, sink)

        getattr(logger, EMITTERS[severity])("%s", "message")

        if severity >= threshold:
            assert sink.lines == [f"{severity.label} message"]
        else:
            assert sink.lines == []

    @pytest.mark.parametrize("severity,threshold", ALL_PAIRS)
    def test_query_matches_threshold(self, sink, severity, threshold):
        """Test that is_*_enabled returns exactly severity >= threshold."""
        logger = SeverityLogger(threshold, sink)

        assert getattr(logger, QUERIES[severity])() is (severity >= threshold)
        assert logger.is_enabled(severity) is (severity >= threshold)

    def test_debug_threshold_enables_debug(self, sink):
        """Test that DEBUG threshold enables debug output."""
        assert SeverityLogger(Severity.DEBUG, sink).is_debug_enabled()

    def test_fatal_threshold_only_enables_fatal(self, sink):
        """Test that FATAL threshold disables everything else."""
        logger = SeverityLogger(Severity.FATAL, sink)

        assert not logger.is_debug_enabled()
        assert not logger.is_error_enabled()
        assert logger.is_fatal_enabled()

    def test_suppressed_call_does_not_touch_sink(self):
        """Test that suppressed calls never reach the sink."""
        class ExplodingSink(MemoryLineSink):
            def write(self, template, *args):
                raise AssertionError("sink should not be called")

        logger = SeverityLogger(Severity.ERROR, ExplodingSink())

        logger.debug("%s", "x")
        logger.info("%s", "x")
        logger.warning("%s", "x")


class TestOutput:
    """Tests for emitted line content."""

    def test_info_threshold_scenario(self, sink):
        """Test formatting of an info line and suppression of debug."""
        logger = SeverityLogger(Severity.INFO, sink)

        logger.info("%d + %d is equal to %d", 3, 5, 8)
        logger.debug("%s", "x")

        assert sink.lines == ["INFO 3 + 5 is equal to 8"]

    def test_warning_threshold_scenario(self, sink):
        """Test that error and warning are emitted in order and debug is not."""
        logger = SeverityLogger(Severity.WARNING, sink)

        logger.error("%s", "E")
        logger.warning("%s", "W")
        logger.debug("%s", "D")

        assert sink.lines == ["ERROR E", "WARNING W"]

    def test_fatal_logs_without_exiting(self, sink):
        """Test that fatal only writes a line."""
        logger = SeverityLogger(Severity.DEBUG, sink)

        logger.fatal("disk %s is gone", "/dev/sda")

        assert sink.lines == ["FATAL disk /dev/sda is gone"]

    def test_message_without_arguments(self, sink):
        """Test that argument-less messages are written verbatim."""
        logger = SeverityLogger(Severity.DEBUG, sink)

        logger.info("100% done")

        assert sink.lines == ["INFO 100% done"]

    def test_template_passed_to_sink_unformatted(self):
        """Test that the logger only prefixes the template and forwards args."""
        calls = []

        class RecordingSink(MemoryLineSink):
            def write(self, template, *args):
                calls.append((template, args))

        logger = SeverityLogger(Severity.DEBUG, RecordingSink())
        logger.warning("%s=%d", "retries", 3)

        assert calls == [("WARNING %s=%d", ("retries", 3))]

    def test_sink_errors_propagate(self, sink):
        """Test that formatting errors from the sink are not swallowed."""
        logger = SeverityLogger(Severity.DEBUG, sink)

        with pytest.raises(TypeError):
            logger.info("%d", "not a number")

    def test_shared_sink_independent_thresholds(self, sink):
        """Test that loggers sharing a sink keep their own thresholds."""
        verbose = SeverityLogger(Severity.DEBUG, sink)
        quiet = SeverityLogger(Severity.ERROR, sink)

        verbose.debug("%s", "from verbose")
        quiet.debug("%s", "from quiet")
        quiet.error("%s", "quiet error")

        assert sink.lines == ["DEBUG from verbose", "ERROR quiet error"]


class TestExpensiveArguments:
    """Tests for guarding expensive argument construction."""

    def test_guard_skips_expensive_call(self, sink):
        """Test that checking is_debug_enabled avoids building arguments."""
        calls = []

        def dump_state():
            calls.append(1)
            return "Hard to generate string"

        logger = SeverityLogger(Severity.INFO, sink)
        if logger.is_debug_enabled():
            logger.debug("The state of the process is: %s", dump_state())

        assert calls == []
        assert sink.lines == []

    def test_guard_allows_enabled_call(self, sink):
        """Test that the guarded call is made when debug is enabled."""
        logger = SeverityLogger(Severity.DEBUG, sink)
        if logger.is_debug_enabled():
            logger.debug("The state of the process is: %s", "Hard to generate string")

        assert sink.lines == ["DEBUG The state of the process is: Hard to generate string"]


def test_properties_and_interface(sink):
    """Test exposed threshold, sink and base class."""
    logger = SeverityLogger(Severity.WARNING, sink)

    assert isinstance(logger, Logger)
    assert logger.threshold is Severity.WARNING
    assert logger.sink is sink
    assert "WARNING" in repr(logger)


def test_repr_with_unvalidated_threshold(sink):
    """Test that repr works for thresholds that are not Severity members."""
    logger = SeverityLogger(2, sink)

    assert "threshold=2" in repr(logger)
    assert logger.is_warning_enabled()
    assert not logger.is_info_enabled()
