"""Generate TypeScript definition files from extracted type descriptors."""

__version__ = "0.4.0"
