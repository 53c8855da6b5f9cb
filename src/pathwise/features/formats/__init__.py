"""Structured-format codec registry."""

from .codecs import CODECS, FormatCodec, codec_for, supported_formats

__all__ = ["CODECS", "FormatCodec", "codec_for", "supported_formats"]
