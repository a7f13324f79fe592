# cadastro/infrastructure/sessao_store.py
from __future__ import annotations

import secrets
import threading
from collections.abc import Callable
from datetime import datetime, timedelta, timezone

from cadastro.domain.acesso.sessao import Sessao
from cadastro.domain.usuario.entities import Usuario


def _agora() -> datetime:
    return datetime.now(timezone.utc)


class SessaoStore:
    """Sessoes em memoria indexadas por token bearer.

    Sessoes expiradas sao descartadas na leitura do proprio token e a cada
    novo login. Reiniciar o processo encerra todas as sessoes.
    """

    def __init__(self, ttl_minutos: int, relogio: Callable[[], datetime] = _agora) -> None:
        self._ttl = timedelta(minutes=ttl_minutos)
        self._relogio = relogio
        self._sessoes: dict[str, Sessao] = {}
        self._lock = threading.Lock()

    def abrir(self, usuario: Usuario) -> Sessao:
        sessao = Sessao(
            token=secrets.token_urlsafe(32),
            usuario_id=usuario.id,
            nome=usuario.nome,
            cpf=usuario.cpf,
            is_admin=usuario.is_admin,
            permissoes=frozenset(usuario.permissoes),
            expira_em=self._relogio() + self._ttl,
        )
        with self._lock:
            self._descartar_expiradas()
            self._sessoes[sessao.token] = sessao
        return sessao

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessoes)

    def _descartar_expiradas(self) -> None:
        # chamado com o lock adquirido
        agora = self._relogio()
        for token in [t for t, s in self._sessoes.items() if s.expirada(agora)]:
            del self._sessoes[token]

    def obter(self, token: str) -> Sessao | None:
        with self._lock:
            sessao = self._sessoes.get(token)
            if sessao is None:
                return None
            if sessao.expirada(self._relogio()):
                del self._sessoes[token]
                return None
            return sessao

    def encerrar(self, token: str) -> None:
        with self._lock:
            self._sessoes.pop(token, None)

    def encerrar_do_usuario(self, usuario_id: str, exceto: str | None = None) -> int:
        """Encerra as sessoes de um usuario, menos a de token `exceto`."""
        with self._lock:
            tokens = [t for t, s in self._sessoes.items() if s.usuario_id == usuario_id and t != exceto]
            for t in tokens:
                del self._sessoes[t]
        return len(tokens)
