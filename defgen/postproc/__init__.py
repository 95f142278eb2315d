"""Post-processing applied to fully assembled definition files."""

from .normalize import OutputNormalizer

__all__ = ["OutputNormalizer"]
