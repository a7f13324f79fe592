# cadastro/interfaces/api/main.py
from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from cadastro.infrastructure.config import get_settings
from cadastro.interfaces.api.middleware.rate_limit import RateLimitMiddleware
from cadastro.log import log


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    from cadastro.application.services.auth_service import AuthService
    from cadastro.infrastructure.duckdb_connection import get_connection
    from cadastro.infrastructure.repositories.duckdb_usuario_repo import DuckDBUsuarioRepo
    from cadastro.interfaces.api.dependencies import get_sessao_store

    settings = get_settings()
    cursor = get_connection().cursor()  # valida conexao e aplica schema no startup
    try:
        AuthService(DuckDBUsuarioRepo(cursor), get_sessao_store()).garantir_administrador(settings)
    finally:
        cursor.close()
    log(f"API pronta (banco: {settings.duckdb_path})")
    yield


app = FastAPI(
    title="Cadastro de Contratos API",
    debug=get_settings().debug,
    lifespan=lifespan,
    docs_url="/api/docs",
    redoc_url=None,
)


@app.middleware("http")
async def add_security_headers(request: Request, call_next: object) -> Response:
    response = await call_next(request)  # type: ignore[misc]
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
    return response  # type: ignore[return-value]


app.add_middleware(RateLimitMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(get_settings().cors_origins),
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["Authorization", "Content-Type"],
)


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


from cadastro.interfaces.api.routes.auth_routes import router as auth_router  # noqa: E402
from cadastro.interfaces.api.routes.cadastro_routes import routers as cadastro_routers  # noqa: E402
from cadastro.interfaces.api.routes.stats_routes import router as stats_router  # noqa: E402
from cadastro.interfaces.api.routes.validacao_routes import router as validacao_router  # noqa: E402

app.include_router(auth_router, prefix="/api")
app.include_router(stats_router, prefix="/api")
app.include_router(validacao_router, prefix="/api")
for cadastro_router in cadastro_routers:
    app.include_router(cadastro_router, prefix="/api")
