"""src/pathwise/features/formats/codecs.py
What: Structured-format codecs keyed by file extension.
Why: Resolve a decoder/encoder once from a fixed table instead of branching on strings.
"""

from __future__ import annotations

import json
import pickle
from collections.abc import Mapping
from types import MappingProxyType
from typing import IO, Any, Protocol, final

import msgpack
import yaml
from lxml import etree
from lxml import html as lxml_html

from pathwise.shared.errors import UnsupportedFormatError


class FormatCodec(Protocol):
    """Decode a binary stream into objects and encode objects back to bytes."""

    @property
    def name(self) -> str:
        ...

    def decode(self, stream: IO[bytes]) -> Any:
        ...

    def encode(self, obj: Any) -> bytes:
        ...


@final
class JsonCodec:
    name = "json"

    def decode(self, stream: IO[bytes]) -> Any:
        return json.load(stream)

    def encode(self, obj: Any) -> bytes:
        return json.dumps(obj, indent=2, ensure_ascii=False).encode("utf-8")


@final
class YamlCodec:
    name = "yaml"

    def decode(self, stream: IO[bytes]) -> Any:
        return yaml.safe_load(stream)

    def encode(self, obj: Any) -> bytes:
        return yaml.safe_dump(obj, allow_unicode=True, sort_keys=False).encode("utf-8")


@final
class XmlCodec:
    """XML documents parsed into an lxml ``ElementTree``.

    External entities and network access are disabled.
    """

    name = "xml"

    def decode(self, stream: IO[bytes]) -> Any:
        parser = etree.XMLParser(resolve_entities=False, no_network=True)
        return etree.parse(stream, parser)

    def encode(self, obj: Any) -> bytes:
        return etree.tostring(obj, xml_declaration=True, encoding="utf-8", pretty_print=True)


@final
class HtmlCodec:
    name = "html"

    def decode(self, stream: IO[bytes]) -> Any:
        return lxml_html.parse(stream)

    def encode(self, obj: Any) -> bytes:
        return lxml_html.tostring(obj, encoding="utf-8")


@final
class PickleCodec:
    name = "pickle"

    def decode(self, stream: IO[bytes]) -> Any:
        return pickle.load(stream)

    def encode(self, obj: Any) -> bytes:
        return pickle.dumps(obj)


@final
class MsgpackCodec:
    name = "msgpack"

    def decode(self, stream: IO[bytes]) -> Any:
        return msgpack.unpackb(stream.read(), raw=False)

    def encode(self, obj: Any) -> bytes:
        return msgpack.packb(obj, use_bin_type=True)


def _build_registry() -> Mapping[str, FormatCodec]:
    json_codec, yaml_codec = JsonCodec(), YamlCodec()
    xml_codec, html_codec = XmlCodec(), HtmlCodec()
    pickle_codec, msgpack_codec = PickleCodec(), MsgpackCodec()
    table: dict[str, FormatCodec] = {
        "json": json_codec,
        "yaml": yaml_codec,
        "yml": yaml_codec,
        "xml": xml_codec,
        "rdf": xml_codec,
        "rss": xml_codec,
        "html": html_codec,
        "htm": html_codec,
        "pickle": pickle_codec,
        "pkl": pickle_codec,
        "marshal": pickle_codec,
        "msgpack": msgpack_codec,
        "mpk": msgpack_codec,
    }
    return MappingProxyType(table)


CODECS: Mapping[str, FormatCodec] = _build_registry()


def codec_for(tag: str | None, *, path: str | None = None) -> FormatCodec:
    """Return the codec registered for ``tag`` (case-insensitive).

    Raises:
        UnsupportedFormatError: If ``tag`` is missing or unknown.
    """

    codec = CODECS.get(tag.lower()) if tag else None
    if codec is None:
        raise UnsupportedFormatError(tag, path=path)
    return codec


def supported_formats() -> list[str]:
    """Return every extension tag with a registered codec."""

    return sorted(CODECS)


__all__ = [
    "CODECS",
    "FormatCodec",
    "HtmlCodec",
    "JsonCodec",
    "MsgpackCodec",
    "PickleCodec",
    "XmlCodec",
    "YamlCodec",
    "codec_for",
    "supported_formats",
]
