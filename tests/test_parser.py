"""Tests for the Forwarded header scanner."""

import threading

import pytest

from forwarded import Parser, parse, parse_pairs


class TestParsePairs:
    def test_empty_header(self):
        assert parse_pairs("") == []

    def test_single_pair(self):
        assert parse_pairs("for=192.0.2.43") == [{"for": "192.0.2.43"}]

    def test_pairs_and_elements(self):
        assert parse_pairs("for=192.0.2.60;proto=http;by=203.0.113.43, for=198.51.100.17") == [
            {"for": "192.0.2.60", "proto": "http", "by": "203.0.113.43"},
            {"for": "198.51.100.17"},
        ]

    def test_whitespace_is_trimmed(self):
        assert parse_pairs(" for = 192.0.2.43 ; by = unknown ") == [
            {"for": "192.0.2.43", "by": "unknown"}
        ]

    def test_quoted_string(self):
        assert parse_pairs('for="[2001:db8:cafe::17]:4711"') == [{"for": "[2001:db8:cafe::17]:4711"}]

    def test_separators_inside_quoted_string(self):
        assert parse_pairs('host="a;b,c=d";proto=https') == [{"host": "a;b,c=d", "proto": "https"}]

    @pytest.mark.parametrize(
        "header, value",
        [
            (r'for="a\"b"', 'a"b'),
            (r'for="a\\b"', "a\\b"),
            (r'for="\x"', "x"),
        ],
    )
    def test_escaping(self, header, value):
        assert parse_pairs(header) == [{"for": value}]

    def test_empty_value_is_kept(self):
        assert parse_pairs("for=;proto=http") == [{"for": "", "proto": "http"}]

    def test_repeated_token_last_write_wins(self):
        assert parse_pairs("for=10.0.0.1;for=10.0.0.2") == [{"for": "10.0.0.2"}]

    def test_tokens_keep_their_case(self):
        assert parse_pairs("For=10.0.0.1") == [{"For": "10.0.0.1"}]

    def test_only_separators(self):
        assert parse_pairs(",,,") == [{}, {}, {}]

    def test_empty_element_between_separators(self):
        assert parse_pairs("for=10.0.0.1,,for=10.0.0.2") == [
            {"for": "10.0.0.1"},
            {},
            {"for": "10.0.0.2"},
        ]

    def test_trailing_separator(self):
        assert parse_pairs("for=10.0.0.1;") == [{"for": "10.0.0.1"}]
        assert parse_pairs("for=10.0.0.1,") == [{"for": "10.0.0.1"}]

    def test_trailing_whitespace_is_a_segment(self):
        assert parse_pairs("for=10.0.0.1, ") == [{"for": "10.0.0.1"}, {"": ""}]
        assert len(parse("for=10.0.0.1, ")) == 2

    def test_semicolon_before_equals_is_part_of_token(self):
        assert parse_pairs("for;by=x") == [{"for;by": "x"}]
        assert parse_pairs("secret;for=10.0.0.1") == [{"secret;for": "10.0.0.1"}]

    def test_token_without_value(self):
        assert parse_pairs("for=10.0.0.1;secret") == [{"for": "10.0.0.1", "secret": ""}]

    def test_unicode(self):
        assert parse_pairs('host="exämple.test";for=_ñ') == [{"host": "exämple.test", "for": "_ñ"}]

    @pytest.mark.parametrize(
        "header, count",
        [
            ("for=a", 1),
            ("for=a,for=b", 2),
            ("for=a;by=b,for=c;by=d,for=e", 3),
            ('for="x,y",for=z', 2),
        ],
    )
    def test_element_count_matches_segments(self, header, count):
        assert len(parse_pairs(header)) == count


class TestParserReuse:
    def test_state_is_reset_between_calls(self):
        parser = Parser()
        # Unterminated quoted string must not leak into the next parse
        assert parser.parse_pairs('for="abc') == [{"for": "abc"}]
        assert parser.parse_pairs("by=unknown") == [{"by": "unknown"}]

    def test_parse_returns_forwarded(self):
        parser = Parser()
        first = parser.parse("for=10.0.0.1")
        second = parser.parse("for=10.0.0.2,for=10.0.0.3")
        assert len(first) == 1
        assert len(second) == 2
        assert parser.parse("for=10.0.0.1") == first


class TestConcurrency:
    def test_module_level_parse_from_many_threads(self):
        headers = [f"for=10.0.0.{i}:{1000 + i};proto=https, by=_proxy{i}" for i in range(32)]
        results = [None] * len(headers)

        def worker(index):
            results[index] = parse(headers[index])

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(len(headers))]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        for i, forwarded in enumerate(results):
            assert len(forwarded) == 2
            assert forwarded[0].for_.ip == f"10.0.0.{i}"
            assert forwarded[0].for_.port == 1000 + i
            assert forwarded[1].by.identifier == f"proxy{i}"


class TestRFCExamples:
    def test_simple_forward(self):
        """https://www.rfc-editor.org/rfc/rfc7239#section-7.5"""
        forwarded = parse("for=192.0.2.43")

        assert len(forwarded) == 1
        forward = forwarded.first
        assert forward.for_.is_v4
        assert forward.for_.ip == "192.0.2.43"
        assert forward.by is None
        assert forward.host is None
        assert forward.proto is None

    def test_example_71(self):
        """https://www.rfc-editor.org/rfc/rfc7239#section-7.1"""
        forwarded = parse('for=192.0.2.43,for="[2001:db8:cafe::17]",for=unknown')

        assert len(forwarded) == 3
        assert forwarded[0].for_.ip == "192.0.2.43"
        assert forwarded[1].for_.ip == "2001:db8:cafe::17"
        assert forwarded[2].for_.is_unknown

    def test_single_element_all_parameters(self):
        forward = parse("for=192.0.2.43:55423;proto=http;host=test.dev;by=unknown").first

        assert forward.for_.ip == "192.0.2.43"
        assert forward.for_.port == 55423
        assert forward.by.is_unknown
        assert forward.host == "test.dev"
        assert forward.proto == "http"

    def test_everything(self):
        forwarded = parse(
            "for=192.0.2.43:55423;proto=http;host=test.dev;by=unknown,"
            "for=_something; by=unknown, "
            'for="[2001:db8:cafe::17]:22";host=another.test;by=172.55.10.10,'
            "for=unknown"
        )

        assert len(forwarded) == 4

        forward = forwarded[0]
        assert forward.for_.is_ip
        assert forward.for_.is_v4
        assert forward.for_.ip == "192.0.2.43"
        assert forward.for_.port == 55423
        assert forward.by.is_unknown
        assert forward.host == "test.dev"
        assert forward.proto == "http"

        forward = forwarded[1]
        assert forward.for_.is_identifier
        assert forward.for_.identifier == "something"
        assert forward.by.is_unknown
        assert forward.host is None
        assert forward.proto is None

        forward = forwarded[2]
        assert forward.for_.is_ip
        assert forward.for_.is_v6
        assert forward.for_.ip == "2001:db8:cafe::17"
        assert forward.for_.port == 22
        assert forward.by.is_v4
        assert forward.by.ip == "172.55.10.10"
        assert forward.by.port is None
        assert forward.host == "another.test"
        assert forward.proto is None

        forward = forwarded[3]
        assert forward.for_.is_unknown
        assert forward.by is None
        assert forward.host is None
        assert forward.proto is None
