#!/usr/bin/env python3
"""
Tests for the resilient JSON scanner and the log field extractor.
"""

import json

import pytest

from officekit.log_parser import extract, scan, summarize


class TestScanFastPath:
    """Input that is already one JSON document."""

    def test_empty_input(self):
        assert scan("") == []

    def test_single_object(self):
        values = scan('{"log":"a"}')
        assert values == [{"log": "a"}]
        assert extract(values) == ["a"]

    def test_array_elements_in_order(self):
        values = scan('[{"log":"a"},{"log":"b"}]')
        assert values == [{"log": "a"}, {"log": "b"}]
        assert extract(values) == ["a", "b"]

    @pytest.mark.parametrize("raw, expected", [
        ('"hello"', ["hello"]),
        ("42", [42]),
        ("null", [None]),
    ])
    def test_bare_scalar_is_one_element(self, raw, expected):
        assert scan(raw) == expected

    def test_array_with_non_objects_passes_through(self):
        values = scan('[1, "x", null, {"log": "a"}, [2]]')
        assert values == [1, "x", None, {"log": "a"}, [2]]
        assert extract(values) == ["a"]

    def test_nested_array_is_not_flattened(self):
        assert scan('[[{"log":"a"}]]') == [[{"log": "a"}]]

    def test_escaped_quote_inside_string(self):
        values = scan(r'{"log":"a\"b"}')
        assert len(values) == 1
        assert values[0]["log"] == 'a"b'


class TestScanFallback:
    """Concatenated objects recovered by the character scan."""

    def test_concatenation_without_separators(self):
        values = scan('{"log":"a"}{"log":"b"}')
        assert values == [{"log": "a"}, {"log": "b"}]
        assert extract(values) == ["a", "b"]

    def test_whitespace_between_objects(self):
        raw = '{"log":"a"}\n\n   {"log":"b"}\r\n\t{"log":"c"}\n'
        assert extract(scan(raw)) == ["a", "b", "c"]

    def test_braces_inside_strings_do_not_shift_depth(self):
        values = scan('{"log":"a{b}c"}{"log":"}}{{"}')
        assert values == [{"log": "a{b}c"}, {"log": "}}{{"}]

    def test_escaped_quote_does_not_end_string(self):
        values = scan(r'{"log":"a\"b"}{"log":"c\"}"}')
        assert [v["log"] for v in values] == ['a"b', 'c"}']

    def test_escaped_backslash_before_quote(self):
        values = scan(r'{"log":"path\\"}{"log":"x"}')
        assert [v["log"] for v in values] == ["path\\", "x"]

    def test_nested_objects(self):
        raw = '{"log":"a","kubernetes":{"pod":{"name":"p"}}}{"kubernetes":{"log":"k"}}'
        values = scan(raw)
        assert len(values) == 2
        assert values[0]["kubernetes"]["pod"]["name"] == "p"
        assert extract(values) == ["a", "k"]

    def test_malformed_trailing_fragment_dropped(self):
        assert scan('{"log":"a"}{"bad"') == [{"log": "a"}]

    def test_malformed_middle_fragment_dropped(self):
        values = scan('{"log":"a"}{"log":}{"log":"b"}')
        assert extract(values) == ["a", "b"]

    def test_escaped_brace_outside_string_then_space(self):
        # "\}" closes nothing; the candidate is tried at the next space, fails, and is dropped
        values = scan('\\} {"log":"a"}')
        assert values == [{"log": "a"}]

    def test_stray_closing_brace_desynchronizes_depth(self):
        assert scan('}{"log":"a"}') == []

    def test_garbage_only(self):
        assert scan("this is not json at all") == []

    def test_unicode_is_kept(self):
        values = scan('{"log":"héllo 🚀"}{"log":"日本"}')
        assert extract(values) == ["héllo 🚀", "日本"]

    def test_non_standard_constants_rejected(self):
        assert scan("NaN") == []
        assert scan('{"log":"a","v":NaN}{"log":"b"}') == [{"log": "b"}]

    def test_deep_nesting_never_raises(self):
        assert scan("[" * 100000) == []
        assert isinstance(scan('{"a":' * 100000), list)


class TestScanBufferCap:

    def test_oversized_candidate_skipped(self):
        raw = '{"log":"aaaaaaaaaaaaaaaaaaaa"}{"log":"b"}'
        assert scan(raw, max_buffer=12) == [{"log": "b"}]

    def test_no_cap_keeps_everything(self):
        raw = '{"log":"aaaaaaaaaaaaaaaaaaaa"}{"log":"b"}'
        assert len(scan(raw)) == 2

    def test_cap_does_not_apply_to_fast_path(self):
        assert scan('{"log":"aaaaaaaaaaaaaaaaaaaa"}', max_buffer=5) == [{"log": "aaaaaaaaaaaaaaaaaaaa"}]

    def test_skipping_respects_strings(self):
        raw = '{"log":"}}}}}}}}}}}}}}"}{"log":"b"}'
        assert scan(raw, max_buffer=12) == [{"log": "b"}]


class TestExtract:

    def test_log_field_verbatim(self):
        assert extract([{"log": "  spaced \n"}]) == ["  spaced \n"]

    def test_empty_top_level_log_is_kept(self):
        assert extract([{"log": ""}]) == [""]

    def test_nested_kubernetes_log(self):
        assert extract([{"kubernetes": {"log": "x"}}]) == ["x"]

    def test_empty_nested_log_dropped(self):
        assert extract([{"kubernetes": {"log": ""}}]) == []

    @pytest.mark.parametrize("nested", [None, 0, False, [], {}, 5])
    def test_non_string_nested_log_dropped(self, nested):
        assert extract([{"kubernetes": {"log": nested}}]) == []

    def test_top_level_log_wins_over_nested(self):
        assert extract([{"log": "top", "kubernetes": {"log": "nested"}}]) == ["top"]

    def test_non_string_top_level_falls_through(self):
        assert extract([{"log": 123, "kubernetes": {"log": "nested"}}]) == ["nested"]

    def test_kubernetes_not_a_mapping(self):
        assert extract([{"kubernetes": "log"}, {"kubernetes": ["log"]}]) == []

    def test_missing_fields_keep_order_of_the_rest(self):
        values = [{"log": "a"}, {"msg": "skip"}, 7, None, {"kubernetes": {"log": "b"}}, {"log": "c"}]
        assert extract(values) == ["a", "b", "c"]

    def test_empty_sequence(self):
        assert extract([]) == []


class TestSummarize:

    def test_stats(self):
        text, stats = summarize(["a", "bb"])
        assert text == "a\nbb"
        assert stats == {"total_count": 2, "char_count": 4}

    def test_empty(self):
        assert summarize([]) == ("", {"total_count": 0, "char_count": 0})


def test_repeated_runs_are_identical():
    raw = '{"log":"a"}{"kubernetes":{"log":"b"}}{"broken"'
    first = extract(scan(raw))
    second = extract(scan(raw))
    assert first == second == ["a", "b"]


def test_container_log_stream():
    records = [
        {"log": "GET /health 200\n", "stream": "stdout", "time": "2026-10-18T10:00:00Z"},
        {"log": "warning: retry {attempt=2}\n", "stream": "stderr", "time": "2026-10-18T10:00:01Z"},
        {"kubernetes": {"pod_name": "api-7d9", "log": "pod says \"hi\""}},
    ]
    raw = "".join(json.dumps(r) for r in records)
    assert extract(scan(raw)) == [
        "GET /health 200\n",
        "warning: retry {attempt=2}\n",
        'pod says "hi"',
    ]
