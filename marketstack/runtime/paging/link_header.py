"""Parser for RFC 8288 ``Link`` headers.

Only what keyset continuation needs: find the ``rel="next"`` target of a
header such as ``<https://host/v1/eod?cursor=abc>; rel="next"``.
"""

from __future__ import annotations

from urllib.parse import urlsplit

from ...config import LINK_HEADER
from ...core.exceptions import LinkHeaderError
from ..rest.client import HttpResponse


def _split_links(value: str) -> list[str]:
    # Commas inside <...> or quoted strings do not separate links
    parts: list[str] = []
    current: list[str] = []
    in_url = in_quote = False
    for ch in value:
        if ch == "<" and not in_quote:
            in_url = True
        elif ch == ">" and not in_quote:
            in_url = False
        elif ch == '"' and not in_url:
            in_quote = not in_quote
        elif ch == "," and not in_url and not in_quote:
            parts.append("".join(current))
            current = []
            continue
        current.append(ch)
    if in_url or in_quote:
        raise LinkHeaderError("unterminated URL or quoted string", value)
    parts.append("".join(current))
    return parts


def parse_link_header(value: str) -> dict[str, str]:
    """Map each ``rel`` of a ``Link`` header to its target URL.

    Args:
        value: Raw header value

    Returns:
        Relation type to URL; the first link wins for a repeated relation

    Raises:
        LinkHeaderError: If the header is malformed
    """
    links: dict[str, str] = {}
    for part in _split_links(value):
        part = part.strip()
        if not part:
            continue
        if not part.startswith("<") or ">" not in part:
            raise LinkHeaderError(f"expected '<url>' in {part!r}", value)
        url, _, rest = part[1:].partition(">")
        rest = rest.strip()
        if rest and not rest.startswith(";"):
            raise LinkHeaderError(f"unexpected text after URL in {part!r}", value)

        rels: list[str] = []
        for param in rest.split(";")[1:]:
            key, sep, raw_value = param.partition("=")
            key = key.strip().lower()
            if not key:
                raise LinkHeaderError(f"empty parameter in {part!r}", value)
            if key == "rel":
                if not sep:
                    raise LinkHeaderError(f"rel without a value in {part!r}", value)
                rels.extend(raw_value.strip().strip('"').split())

        for rel in rels:
            links.setdefault(rel.lower(), url.strip())
    return links


def next_page_from_headers(rsp: HttpResponse) -> str | None:
    """Extract the continuation URL from a response, if the server sent one.

    Raises:
        LinkHeaderError: If the header is malformed or the URL is not absolute
    """
    header = rsp.header(LINK_HEADER)
    if header is None:
        return None
    url = parse_link_header(header).get("next")
    if url is None:
        return None
    parts = urlsplit(url)
    if not parts.scheme or not parts.netloc:
        raise LinkHeaderError(f"invalid next URL {url!r}", header)
    return url
