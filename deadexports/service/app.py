"""FastAPI application entrypoint for deadexports service mode."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, List, Optional

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..config import ConfigError
from ..models import DeadExportReport
from ..scanner import DeadExportScanner


class ScanRequest(BaseModel):
    path: str
    extensions: Optional[List[str]] = None
    ignore: Optional[List[str]] = None
    import_mode: Optional[str] = None


class FileResult(BaseModel):
    path: str
    dead_exports: List[str]
    total: int


class ScanResponse(BaseModel):
    root: Optional[str] = None
    files: List[FileResult]
    total_files: int


class HealthResponse(BaseModel):
    status: str


def _default_scanner() -> DeadExportScanner:
    return DeadExportScanner()


def create_app(
    scanner_factory: Callable[[], DeadExportScanner] = _default_scanner,
) -> FastAPI:
    """Create the FastAPI application exposing dead export scans."""

    app = FastAPI(title="deadexports service", version="1.0.0")

    async def get_scanner() -> DeadExportScanner:
        return scanner_factory()

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/scan", response_model=ScanResponse)
    async def scan(
        payload: ScanRequest,
        scanner: DeadExportScanner = Depends(get_scanner),
    ) -> ScanResponse:
        def _run_scan() -> DeadExportReport:
            return scanner.scan(
                payload.path,
                extensions=payload.extensions,
                ignore=payload.ignore,
                import_mode=payload.import_mode,
            )

        loop = asyncio.get_running_loop()
        report = await loop.run_in_executor(None, _run_scan)
        return ScanResponse(**report.to_dict())

    @app.exception_handler(FileNotFoundError)
    async def file_not_found_handler(_: Any, exc: FileNotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(NotADirectoryError)
    async def not_a_directory_handler(_: Any, exc: NotADirectoryError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(ConfigError)
    async def config_error_handler(_: Any, exc: ConfigError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    return app


def run_service(
    host: str = "127.0.0.1", port: int = 8000
) -> None:  # pragma: no cover - integration path
    import uvicorn

    uvicorn.run(create_app(), host=host, port=port)


def main() -> None:  # pragma: no cover - console script
    run_service()
