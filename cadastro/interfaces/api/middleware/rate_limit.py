# cadastro/interfaces/api/middleware/rate_limit.py
#
# Limite por IP em janela deslizante de 60s, aplicado apenas a requisicoes
# que gravam (POST/PUT/DELETE), o que inclui o login. Leituras passam livres.
# API_RATE_LIMIT_PER_MINUTE=0 desliga o limite.
from __future__ import annotations

import time
from collections import deque
from collections.abc import Callable

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from cadastro.infrastructure.config import get_settings

_METODOS_LIMITADOS = frozenset({"POST", "PUT", "DELETE"})
_JANELA_SEGUNDOS = 60.0


class JanelaDeslizante:
    """Conta eventos por chave nos ultimos `janela` segundos."""

    def __init__(self, janela: float = _JANELA_SEGUNDOS, relogio: Callable[[], float] = time.monotonic) -> None:
        self._janela = janela
        self._relogio = relogio
        self._eventos: dict[str, deque[float]] = {}

    def registrar(self, chave: str, limite: int) -> bool:
        """Registra um evento; False quando a chave ja atingiu o limite."""
        agora = self._relogio()
        eventos = self._eventos.setdefault(chave, deque())
        while eventos and agora - eventos[0] >= self._janela:
            eventos.popleft()
        if len(eventos) >= limite:
            return False
        eventos.append(agora)
        return True


class RateLimitMiddleware(BaseHTTPMiddleware):
    def __init__(self, app: object) -> None:
        super().__init__(app)  # type: ignore[arg-type]
        self._janela = JanelaDeslizante()

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        limite = get_settings().rate_limit_per_minute
        if limite == 0 or request.method not in _METODOS_LIMITADOS:
            return await call_next(request)

        ip = request.client.host if request.client else "desconhecido"
        if not self._janela.registrar(ip, limite):
            return JSONResponse(
                {"detail": "Muitas requisicoes. Tente novamente em 1 minuto."},
                status_code=429,
            )
        return await call_next(request)
