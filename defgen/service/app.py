"""FastAPI application exposing definition generation over HTTP."""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from ..config import ConfigError, EmitterConfig, config_from_mapping
from ..errors import DefinitionError, MissingBaseClassError, MissingImportError
from ..generator import DefinitionGenerator
from ..models import DescriptorError, descriptors_from_data


class GenerateRequest(BaseModel):
    source_path: str
    types: List[Dict[str, Any]]
    config: Optional[Dict[str, Any]] = None


class GenerateResponse(BaseModel):
    content: str
    imported: List[str] = Field(default_factory=list)
    missing: List[str] = Field(default_factory=list)
    unresolved_bases: List[str] = Field(default_factory=list)


class HealthResponse(BaseModel):
    status: str


def _default_generator_factory(config: EmitterConfig) -> DefinitionGenerator:
    return DefinitionGenerator(config)


def create_app(
    generator_factory: Callable[[EmitterConfig], DefinitionGenerator] = _default_generator_factory,
    *,
    base_config: EmitterConfig | None = None,
) -> FastAPI:
    """Create the FastAPI application exposing defgen operations."""

    app = FastAPI(title="defgen service", version="1.0.0")
    defaults = base_config or EmitterConfig()

    async def get_factory() -> Callable[[EmitterConfig], DefinitionGenerator]:
        return generator_factory

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/generate", response_model=GenerateResponse)
    def generate(
        payload: GenerateRequest,
        factory: Callable[[EmitterConfig], DefinitionGenerator] = Depends(get_factory),
    ) -> GenerateResponse:
        # sync handler: FastAPI runs it in the threadpool
        config = defaults
        if payload.config:
            config = defaults.with_overrides(**_config_overrides(payload.config))
        descriptors = descriptors_from_data(payload.types)
        result = factory(config).run(descriptors, payload.source_path)
        return GenerateResponse(
            content=result.content,
            imported=result.imports.imported,
            missing=result.imports.missing,
            unresolved_bases=result.imports.unresolved_bases,
        )

    @app.exception_handler(MissingBaseClassError)
    async def missing_base_handler(_: Any, exc: MissingBaseClassError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "detail": str(exc),
                "base_name": exc.base_name,
                "expected_path": str(exc.expected_path),
            },
        )

    @app.exception_handler(MissingImportError)
    async def missing_import_handler(_: Any, exc: MissingImportError) -> JSONResponse:
        return JSONResponse(status_code=422, content={"detail": str(exc), "names": exc.names})

    @app.exception_handler(DefinitionError)
    async def definition_error_handler(
        _: Any, exc: DefinitionError
    ) -> JSONResponse:  # pragma: no cover - simple mapping
        return JSONResponse(status_code=422, content={"detail": str(exc)})

    @app.exception_handler(DescriptorError)
    async def descriptor_error_handler(_: Any, exc: DescriptorError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(ConfigError)
    async def config_error_handler(_: Any, exc: ConfigError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    return app


def _config_overrides(data: Dict[str, Any]) -> Dict[str, Any]:
    # validate through the same rules as .defgen.yml, then keep only given keys
    parsed = config_from_mapping(data)
    return {key: getattr(parsed, key) for key in data if data[key] is not None}


def run_service(
    host: str = "127.0.0.1", port: int = 8000
) -> None:  # pragma: no cover - integration path
    import uvicorn

    uvicorn.run(create_app(), host=host, port=port)
