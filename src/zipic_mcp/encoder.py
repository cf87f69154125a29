from __future__ import annotations

"""Encode validated requests into the Zipic deep-link grammar."""

import re
from typing import List, Tuple, Union
from urllib.parse import parse_qsl, quote, urlencode, urlsplit

from .exceptions import EncodingFailure
from .models import AdvancedRequest, EncodedRequest, QuickRequest

DEFAULT_SCHEME = "zipic"
COMMAND = "compress"
TARGET_KEY = "target"

_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")


def _bool(value: bool) -> str:
    return "true" if value else "false"


def encode(request: Union[QuickRequest, AdvancedRequest]) -> EncodedRequest:
    """
    Return the ordered request parameters for ``request``.

    Emission order is fixed: targets, level, format, the placement group,
    width, height, the suffix group, then addSubfolder. Absent fields are
    omitted so the application applies its own defaults. ``location`` and
    ``specified=false`` are derived from ``directory`` and ``addSuffix`` from
    ``suffix``; neither can be set on its own.
    """
    pairs: List[Tuple[str, str]] = [(TARGET_KEY, target) for target in request.targets]
    if isinstance(request, QuickRequest):
        return EncodedRequest(tuple(pairs))

    if request.level is not None:
        pairs.append(("level", str(request.level)))
    if request.format is not None:
        pairs.append(("format", request.format))

    if request.directory is not None:
        pairs.append(("directory", request.directory))
        pairs.append(("location", "custom"))
        pairs.append(("specified", "false"))
    elif request.use_default_directory:
        pairs.append(("specified", "true"))

    if request.width is not None:
        pairs.append(("width", str(request.width)))
    if request.height is not None:
        pairs.append(("height", str(request.height)))

    if request.suffix is not None:
        pairs.append(("suffix", request.suffix))
        pairs.append(("addSuffix", "true"))

    if request.add_subfolder is not None:
        pairs.append(("addSubfolder", _bool(request.add_subfolder)))

    return EncodedRequest(tuple(pairs))


def build_uri(encoded: EncodedRequest, scheme: str = DEFAULT_SCHEME) -> str:
    """Serialize ``encoded`` as ``<scheme>://compress?<query>``.

    Raises :class:`EncodingFailure` when the result would not parse back into
    the same scheme, command and parameters.
    """
    if not scheme or not _SCHEME_RE.match(scheme):
        raise EncodingFailure(f"Invalid request scheme: {scheme!r}")
    for key, value in encoded:
        if not isinstance(key, str) or not isinstance(value, str):
            raise EncodingFailure(f"Parameter {key!r} does not have a string value")

    try:
        query = urlencode(list(encoded.pairs), quote_via=quote, safe="/")
    except UnicodeEncodeError as exc:
        raise EncodingFailure(f"Parameters cannot be encoded as UTF-8: {exc}") from exc
    uri = f"{scheme}://{COMMAND}?{query}"

    parts = urlsplit(uri)
    decoded = parse_qsl(parts.query, keep_blank_values=True)
    if parts.scheme != scheme.lower() or parts.netloc != COMMAND or decoded != list(encoded.pairs):
        raise EncodingFailure(f"Encoded parameters do not form a valid request URI: {uri}")
    return uri


__all__ = ["DEFAULT_SCHEME", "COMMAND", "TARGET_KEY", "encode", "build_uri"]
