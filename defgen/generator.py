"""Top-level pipeline turning descriptors into one definition file."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional, Sequence

from . import __version__
from .config import EmitterConfig
from .emitter.body import EOL, BodyRenderer
from .emitter.imports import ImportBlock, ImportResolver
from .emitter.placeholders import ExtendsRegistry, reconcile
from .logging import get_logger
from .models import TypeDescriptor
from .naming import amd_module_name
from .postproc.normalize import OutputNormalizer

BANNER_RULE = "// ------------------------------------------------------------------------------"


@dataclass
class GenerationResult:
    """Finished definition text plus the import pass outcome."""

    content: str
    imports: ImportBlock


def banner_lines(version: str = __version__) -> List[str]:
    return [
        BANNER_RULE,
        "// <auto-generated>",
        f"//     This file was generated by TypeScript Definition Generator v{version}",
        "// </auto-generated>",
        BANNER_RULE,
    ]


class DefinitionGenerator:
    """Runs render, import, reconcile and normalize for one source file at a time.

    Every call allocates its own :class:`ExtendsRegistry`, so one generator
    can serve a batch of unrelated files.
    """

    def __init__(
        self,
        config: EmitterConfig | None = None,
        *,
        file_exists: Optional[Callable[[Path], bool]] = None,
        renderer: BodyRenderer | None = None,
        resolver: ImportResolver | None = None,
        normalizer: OutputNormalizer | None = None,
    ) -> None:
        self.config = config or EmitterConfig()
        self.logger = get_logger("generator")
        self.renderer = renderer or BodyRenderer(self.config)
        self.resolver = resolver or ImportResolver(self.config, file_exists=file_exists)
        self.normalizer = normalizer or OutputNormalizer(self.config)

    def generate(self, descriptors: Sequence[TypeDescriptor], source_path: str) -> str:
        """Return the definition file text for ``descriptors``."""
        return self.run(descriptors, source_path).content

    def run(self, descriptors: Sequence[TypeDescriptor], source_path: str) -> GenerationResult:
        self.logger.debug("Generating definitions for %s (%d types)", source_path, len(descriptors))
        registry = ExtendsRegistry()

        header: List[str] = []
        if self.config.add_amd_module_name:
            header.append(f"/// <amd-module name='{amd_module_name(source_path)}'/>")
        header.extend(banner_lines())

        body = self.renderer.render(descriptors, registry)
        imports = self.resolver.resolve(descriptors, body, source_path, registry)
        self.logger.debug(
            "Resolved %d imports, %d extends clauses", len(imports.imported), len(registry)
        )

        text = "".join(line + EOL for line in header + imports.lines)
        text += reconcile(body.text, registry)
        content = self.normalizer.normalize(text)
        self.logger.info("Generated definitions for %s", source_path)
        return GenerationResult(content=content, imports=imports)


def generate_definitions(
    descriptors: Sequence[TypeDescriptor],
    source_path: str,
    config: EmitterConfig | None = None,
) -> str:
    """Convenience wrapper around :class:`DefinitionGenerator`."""
    return DefinitionGenerator(config).generate(descriptors, source_path)


__all__ = ["DefinitionGenerator", "GenerationResult", "banner_lines", "generate_definitions"]
