# tests/infrastructure/test_sessao_store.py
from datetime import datetime, timedelta, timezone

from cadastro.domain.documentos.value_objects import CPF
from cadastro.domain.usuario.entities import Usuario
from cadastro.infrastructure.sessao_store import SessaoStore


class _Relogio:
    def __init__(self) -> None:
        self.agora = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.agora


def _usuario(usuario_id: str = "u1") -> Usuario:
    return Usuario(
        id=usuario_id,
        nome="Ana",
        cpf=CPF("11144477735"),
        senha_hash="x",
        permissoes=frozenset({"view", "edit"}),
    )


def test_abrir_e_obter_sessao():
    store = SessaoStore(ttl_minutos=30)
    sessao = store.abrir(_usuario())
    assert store.obter(sessao.token) == sessao
    assert sessao.permissoes == frozenset({"view", "edit"})
    assert sessao.is_admin is False


def test_tokens_distintos_por_login():
    store = SessaoStore(ttl_minutos=30)
    assert store.abrir(_usuario()).token != store.abrir(_usuario()).token


def test_sessao_expirada_e_descartada():
    relogio = _Relogio()
    store = SessaoStore(ttl_minutos=30, relogio=relogio)
    sessao = store.abrir(_usuario())
    relogio.agora += timedelta(minutes=29)
    assert store.obter(sessao.token) is not None
    relogio.agora += timedelta(minutes=1)
    assert store.obter(sessao.token) is None


def test_encerrar():
    store = SessaoStore(ttl_minutos=30)
    sessao = store.abrir(_usuario())
    store.encerrar(sessao.token)
    assert store.obter(sessao.token) is None
    store.encerrar("inexistente")


def test_encerrar_do_usuario():
    store = SessaoStore(ttl_minutos=30)
    a1 = store.abrir(_usuario("a"))
    a2 = store.abrir(_usuario("a"))
    b = store.abrir(_usuario("b"))
    assert store.encerrar_do_usuario("a") == 2
    assert store.obter(a1.token) is None
    assert store.obter(a2.token) is None
    assert store.obter(b.token) == b


def test_login_descarta_sessoes_abandonadas():
    relogio = _Relogio()
    store = SessaoStore(ttl_minutos=30, relogio=relogio)
    abandonadas = [store.abrir(_usuario(f"u{i}")) for i in range(3)]
    assert len(store) == 3

    relogio.agora += timedelta(minutes=31)
    nova = store.abrir(_usuario("u9"))

    assert len(store) == 1
    assert store.obter(nova.token) == nova
    assert all(store.obter(s.token) is None for s in abandonadas)


def test_encerrar_do_usuario_preserva_sessao_indicada():
    store = SessaoStore(ttl_minutos=30)
    atual = store.abrir(_usuario("a"))
    outra = store.abrir(_usuario("a"))
    assert store.encerrar_do_usuario("a", exceto=atual.token) == 1
    assert store.obter(atual.token) == atual
    assert store.obter(outra.token) is None
