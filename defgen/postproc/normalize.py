"""Line-ending and indentation policies for generated definitions."""

from __future__ import annotations

from dataclasses import dataclass

from ..config import EmitterConfig


@dataclass
class OutputNormalizer:
    """Applies the configured EOL and indentation style to finished text."""

    config: EmitterConfig

    def normalize(self, text: str) -> str:
        if self.config.eol == "lf":
            text = text.replace("\r\n", "\n")
        if not self.config.indent_tabs:
            text = text.replace("\t", " " * self.config.indent_size)
        return text


__all__ = ["OutputNormalizer"]
