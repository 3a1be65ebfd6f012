"""Unit tests for structured stage logging."""

from __future__ import annotations

import io

from txtepub.telemetry.logger import RunLogger


def test_run_logger_emits_deterministic_stage_lines() -> None:
    sink = io.StringIO()
    run_logger = RunLogger(sink=sink)

    run_logger.log_stage_start("segment")
    run_logger.log_stage_complete("segment", chapters=3, title="My Book")
    run_logger.log_stage_failure("package", "OSError")

    assert sink.getvalue().splitlines() == [
        "[phase] level=INFO stage=segment event=start",
        "[phase] level=INFO stage=segment event=complete chapters=3 title=My_Book",
        "[phase] level=ERROR stage=package event=failure error_type=OSError",
    ]
