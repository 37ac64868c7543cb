"""Tests for URI listing parsing."""

from __future__ import annotations

from amber.urilist import parse_uri_list


def test_parse_uri_list_skips_comments() -> None:
    blob = "# this is a comment\r\nhttp://example.com/1\r\nhttp://example.com/2"

    assert parse_uri_list(blob) == ["http://example.com/1", "http://example.com/2"]


def test_parse_uri_list_skips_blank_and_indented_comments() -> None:
    blob = b"\r\n   # indented comment\r\nhttp://a\r\n\r\n   \r\nhttp://b\r\n"

    assert parse_uri_list(blob) == ["http://a", "http://b"]


def test_parse_uri_list_keeps_lines_verbatim_and_ordered() -> None:
    blob = "http://z \r\n http://y\r\nhttp://x#fragment"

    assert parse_uri_list(blob) == ["http://z ", " http://y", "http://x#fragment"]


def test_parse_uri_list_does_not_split_on_bare_newline() -> None:
    assert parse_uri_list("http://a\nhttp://b") == ["http://a\nhttp://b"]


def test_parse_uri_list_is_repeatable() -> None:
    blob = "http://a\r\nhttp://b"

    assert parse_uri_list(blob) == parse_uri_list(blob)
    assert parse_uri_list("") == []


def test_parse_uri_list_drops_undecodable_lines() -> None:
    assert parse_uri_list(b"http://a\r\n\xff\xfe\r\nhttp://b") == ["http://a", "http://b"]


def test_parse_uri_list_decodes_utf8_lines() -> None:
    assert parse_uri_list("http://example.com/café\r\n".encode("utf-8")) == ["http://example.com/café"]


def test_parse_uri_list_treats_tab_indented_hash_as_comment() -> None:
    assert parse_uri_list("\t# comment\r\n \t\r\nhttp://a") == ["http://a"]
