"""Unit tests for Link header parsing."""

from __future__ import annotations

import pytest

from marketstack.core import LinkHeaderError
from marketstack.runtime.paging import next_page_from_headers, parse_link_header
from marketstack.runtime.rest import HttpResponse


class TestParseLinkHeader:
    def test_single_next(self):
        links = parse_link_header('<https://host/v1/eod?cursor=abc>; rel="next"')
        assert links == {"next": "https://host/v1/eod?cursor=abc"}

    def test_multiple_links(self):
        header = '<https://host/p?a=1>; rel="prev", <https://host/n?a=2>; rel="next"'
        links = parse_link_header(header)
        assert links["prev"] == "https://host/p?a=1"
        assert links["next"] == "https://host/n?a=2"

    def test_comma_inside_url(self):
        links = parse_link_header('<https://host/n?symbols=A,B>; rel="next"')
        assert links["next"] == "https://host/n?symbols=A,B"

    def test_unquoted_and_multi_valued_rel(self):
        assert parse_link_header("<https://h/a>; rel=next")["next"] == "https://h/a"
        links = parse_link_header('<https://h/b>; rel="next last"')
        assert links["next"] == links["last"] == "https://h/b"

    def test_link_without_rel_is_ignored(self):
        assert parse_link_header('<https://h/a>; title="x"') == {}

    @pytest.mark.parametrize(
        "header",
        [
            'https://h/a; rel="next"',
            '<https://h/a; rel="next"',
            '<https://h/a> rel="next"',
            '<https://h/a>; rel',
            '<https://h/a>; rel="next',
        ],
    )
    def test_malformed(self, header):
        with pytest.raises(LinkHeaderError):
            parse_link_header(header)


class TestNextPageFromHeaders:
    def test_absent_header(self):
        assert next_page_from_headers(HttpResponse(status=200)) is None

    def test_no_next_relation(self):
        rsp = HttpResponse(status=200, headers={"Link": '<https://h/p>; rel="prev"'})
        assert next_page_from_headers(rsp) is None

    def test_case_insensitive_header_name(self):
        rsp = HttpResponse(status=200, headers={"link": '<https://h/n>; rel="next"'})
        assert next_page_from_headers(rsp) == "https://h/n"

    def test_relative_url_rejected(self):
        rsp = HttpResponse(status=200, headers={"Link": '</v1/eod?cursor=x>; rel="next"'})
        with pytest.raises(LinkHeaderError):
            next_page_from_headers(rsp)
