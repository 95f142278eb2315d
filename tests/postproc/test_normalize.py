"""Tests for output normalisation."""

from __future__ import annotations

from defgen.config import EmitterConfig
from defgen.postproc.normalize import OutputNormalizer

SAMPLE = "interface A {\r\n\tname: string;\r\n}\r\n"


def test_crlf_and_tabs_are_kept_when_configured() -> None:
    config = EmitterConfig(eol="crlf", indent_tabs=True)
    assert OutputNormalizer(config).normalize(SAMPLE) == SAMPLE


def test_lf_conversion() -> None:
    config = EmitterConfig(eol="lf", indent_tabs=True)
    assert OutputNormalizer(config).normalize(SAMPLE) == "interface A {\n\tname: string;\n}\n"


def test_tabs_become_configured_spaces() -> None:
    config = EmitterConfig(eol="crlf", indent_tabs=False, indent_size=2)
    assert OutputNormalizer(config).normalize(SAMPLE) == "interface A {\r\n  name: string;\r\n}\r\n"


def test_transforms_are_independent_of_order() -> None:
    config = EmitterConfig(eol="lf", indent_tabs=False, indent_size=4)
    normalizer = OutputNormalizer(config)
    once = normalizer.normalize(SAMPLE)
    assert once == "interface A {\n    name: string;\n}\n"
    assert normalizer.normalize(once) == once
