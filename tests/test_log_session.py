#!/usr/bin/env python3
"""
Tests for the Log Extractor session: messages, stats, copy, export, clear.
"""

from datetime import datetime, timedelta, timezone
from unittest.mock import Mock

import pytest

from officekit import log_session
from officekit.log_session import (
    COPY_FAILED_LABEL,
    COPY_LABEL,
    COPY_OK_LABEL,
    EMPTY_INPUT_MESSAGE,
    PLACEHOLDER_OUTPUT,
    LogExtractorSession,
    export_timestamp,
    no_logs_message,
)


@pytest.fixture
def session():
    return LogExtractorSession()


@pytest.fixture
def extracted(session):
    assert session.extract_logs('{"log":"a"}{"log":"bb"}')
    return session


class TestExtractLogs:

    def test_initial_state(self, session):
        assert session.log_output == PLACEHOLDER_OUTPUT
        assert session.is_error is False
        assert session.stats is None
        assert session.copy_label == COPY_LABEL

    @pytest.mark.parametrize("raw", ["", "   ", "\n\t\n"])
    def test_blank_input_rejected(self, session, raw):
        assert session.extract_logs(raw) is False
        assert session.log_output == EMPTY_INPUT_MESSAGE
        assert session.is_error is True
        assert session.stats is None

    def test_success_sets_output_and_stats(self, extracted):
        assert extracted.log_output == "a\nbb"
        assert extracted.logs == ["a", "bb"]
        assert extracted.is_error is False
        assert extracted.stats == {"total_count": 2, "char_count": 4}

    def test_input_is_trimmed_before_scanning(self, session):
        assert session.extract_logs('\n\n  {"log":"a"}  \n')
        assert session.log_output == "a"

    def test_no_log_field_diagnostic(self, session):
        assert session.extract_logs('{"level":"info","msg":"x"}') is False
        assert session.is_error is True
        assert session.stats is None
        assert session.log_output == (
            'No "log" field found in the provided JSON data.\n\n'
            "Parsed 1 objects.\n\n"
            "First object keys: level, msg\n\n"
            "Sample object:\n"
            '{\n  "level": "info",\n  "msg": "x"\n}...'
        )

    def test_nothing_parsed_diagnostic(self, session):
        assert session.extract_logs("definitely not json") is False
        assert session.log_output == (
            'No "log" field found in the provided JSON data.\n\nParsed 0 objects.\n\n'
        )

    def test_sample_truncated(self):
        message = no_logs_message([{"msg": "x" * 1000}])
        sample = message.split("Sample object:\n", 1)[1]
        assert sample.endswith("...")
        assert len(sample) == 300 + 3

    def test_scalar_first_value_lists_no_keys(self):
        message = no_logs_message([42])
        assert "First object keys: \n\n" in message
        assert message.endswith("Sample object:\n42...")

    def test_unexpected_failure_reports_parse_error(self, session, monkeypatch):
        monkeypatch.setattr(log_session, "scan", Mock(side_effect=RuntimeError("boom")))
        assert session.extract_logs('{"log":"a"}') is False
        assert session.is_error is True
        assert session.log_output.startswith("Error parsing JSON: boom\n\n")
        assert session.log_output.endswith("complete and properly formatted.")

    def test_error_clears_previous_result(self, extracted):
        extracted.extract_logs("[]")
        assert extracted.stats is None
        assert extracted.logs == []

    def test_max_buffer_passed_to_scanner(self):
        session = LogExtractorSession(max_buffer=12)
        assert session.extract_logs('{"log":"aaaaaaaaaaaaaaaaaaaa"}{"log":"b"}')
        assert session.log_output == "b"

    def test_same_input_twice(self, session):
        raw = '{"log":"a"}{"kubernetes":{"log":"b"}}'
        session.extract_logs(raw)
        first = (session.log_output, session.stats)
        session.extract_logs(raw)
        assert (session.log_output, session.stats) == first


class TestCopyAndClear:

    def test_copy_success(self, extracted):
        copier = Mock(return_value=True)
        assert extracted.copy_logs(copier) is True
        copier.assert_called_once_with("a\nbb")
        assert extracted.copy_label == COPY_OK_LABEL

    def test_copy_failure(self, extracted):
        assert extracted.copy_logs(Mock(return_value=False)) is False
        assert extracted.copy_label == COPY_FAILED_LABEL
        extracted.reset_copy_label()
        assert extracted.copy_label == COPY_LABEL

    def test_clear(self, extracted):
        extracted.copy_logs(Mock(return_value=True))
        extracted.clear()
        assert extracted.json_input == ""
        assert extracted.log_output == PLACEHOLDER_OUTPUT
        assert extracted.stats is None
        assert extracted.is_error is False
        assert extracted.copy_label == COPY_LABEL


class TestExport:
    NOW = datetime(2026, 10, 18, 12, 34, 56, 789000, tzinfo=timezone.utc)

    def test_timestamp_format(self):
        assert export_timestamp(self.NOW) == "2026-10-18T12-34-56"

    def test_timestamp_converted_to_utc(self):
        local = self.NOW.astimezone(timezone(timedelta(hours=2)))
        assert export_timestamp(local) == "2026-10-18T12-34-56"

    def test_export_writes_utf8(self, tmp_path):
        session = LogExtractorSession()
        session.extract_logs('{"log":"héllo"}{"log":"🚀"}')
        path = session.export_logs(tmp_path, now=self.NOW)
        assert path.name == "logs-2026-10-18T12-34-56.txt"
        assert path.read_bytes() == "héllo\n🚀".encode("utf-8")

    def test_export_never_overwrites(self, extracted, tmp_path):
        first = extracted.export_logs(tmp_path, now=self.NOW)
        second = extracted.export_logs(tmp_path, now=self.NOW)
        assert first != second
        assert second.name == "logs-2026-10-18T12-34-56_2.txt"

    def test_export_creates_directory(self, extracted, tmp_path):
        path = extracted.export_logs(tmp_path / "out" / "nested", now=self.NOW)
        assert path.exists()

    def test_no_export_before_extraction(self, session, tmp_path):
        out = tmp_path / "exports"
        assert session.export_logs(out) is None
        assert not out.exists()

    def test_no_export_after_error(self, session, tmp_path):
        session.extract_logs('{"nope": 1}')
        assert session.export_logs(tmp_path) is None

    def test_export_failure_is_reported(self, extracted, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory", encoding="utf-8")
        assert extracted.export_logs(blocker / "sub", now=self.NOW) is None
        assert extracted.export_error.startswith("Export failed: ")
        # the result survives and a later export to a good directory works
        assert extracted.stats == {"total_count": 2, "char_count": 4}
        assert extracted.export_logs(tmp_path / "ok", now=self.NOW).exists()
        assert extracted.export_error is None

    def test_export_failure_logged(self, extracted, tmp_path, run_log_dir):
        blocker = tmp_path / "blocker"
        blocker.write_text("x", encoding="utf-8")
        extracted.export_logs(blocker / "sub")
        written = "".join(p.read_text(encoding="utf-8") for p in run_log_dir.glob("debug_info*.txt"))
        assert "Export failed." in written
