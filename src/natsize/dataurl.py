"""Parsing of ``data:`` URLs (RFC 2397).

Only what is needed to pull an embedded image out of an ``src`` attribute:
the media type, its parameters, and the decoded body bytes.
"""

import base64
import binascii
import codecs
import re
from dataclasses import dataclass, field
from urllib.parse import unquote_to_bytes

_DATA_URL_PATTERN = re.compile(r"^\s*data:(?P<meta>[^,]*),(?P<body>.*)\Z", re.I | re.S)
_BASE64_SUFFIX = re.compile(r";\s*base64\s*$", re.I)
_MIME_TYPE = re.compile(r"^[!#$%&'*+.^_`|~0-9a-z-]+/[!#$%&'*+.^_`|~0-9a-z-]+$")
_ASCII_WHITESPACE = re.compile(rb"[\t\n\f\r ]+")

DEFAULT_MIME_TYPE = "text/plain"
DEFAULT_CHARSET = "US-ASCII"


@dataclass(frozen=True)
class DataURL:
    """A parsed data URL."""

    mime_type: str
    body: bytes
    parameters: dict[str, str] = field(default_factory=dict)

    @property
    def charset(self) -> str | None:
        return self.parameters.get("charset")


def _parse_media_type(meta: str) -> tuple[str, dict[str, str]]:
    """Split ``type/subtype;key=value`` into a lower-cased type and parameters."""
    essence, *params = meta.split(";")
    essence = essence.strip().lower()

    if not _MIME_TYPE.match(essence):
        return DEFAULT_MIME_TYPE, {"charset": DEFAULT_CHARSET}

    parameters: dict[str, str] = {}
    for param in params:
        name, sep, value = param.partition("=")
        name = name.strip().lower()
        if not sep or not name or name in parameters:
            continue
        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] == '"':
            value = value[1:-1]
        parameters[name] = value
    return essence, parameters


def parse_data_url(url: str) -> DataURL | None:
    """Parse a data URL.

    Args:
        url: Candidate URL string

    Returns:
        DataURL, or None if ``url`` is not a well-formed data URL
    """
    match = _DATA_URL_PATTERN.match(url)
    if not match:
        return None

    meta = match.group("meta")
    body = unquote_to_bytes(match.group("body"))

    is_base64 = bool(_BASE64_SUFFIX.search(meta))
    if is_base64:
        meta = _BASE64_SUFFIX.sub("", meta)
        try:
            body = base64.b64decode(_ASCII_WHITESPACE.sub(b"", body), validate=True)
        except (binascii.Error, ValueError):
            return None

    mime_type, parameters = _parse_media_type(meta)
    return DataURL(mime_type=mime_type, body=body, parameters=parameters)


def resolve_encoding(label: str | None, default: str = "utf-8") -> str:
    """Map a charset label to a Python codec name, falling back to ``default``."""
    if not label:
        return default
    try:
        return codecs.lookup(label.strip()).name
    except LookupError:
        return default


def decode_text(data_url: DataURL) -> str:
    """Decode the body of a text-bearing data URL using its charset.

    Undecodable bytes are replaced rather than raising.
    """
    encoding = resolve_encoding(data_url.charset)
    return data_url.body.decode(encoding, errors="replace")
