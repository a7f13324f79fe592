# cadastro/infrastructure/senha_service.py
#
# Hash de senha via passlib (bcrypt_sha256).
#
# Design decisions:
#   - bcrypt_sha256 aplica SHA-256 antes do bcrypt, entao senhas acima de
#     72 bytes nao sao truncadas.
#   - O custo (rounds) vem de SENHA_BCRYPT_ROUNDS e fica gravado no proprio
#     hash: aumentar o custo nao invalida senhas antigas.
#
# Invariants:
#   - verificar_senha(s, gerar_hash_senha(s)) e sempre True.
#   - Hash vazio ou de formato desconhecido nunca levanta excecao:
#     verificar_senha retorna False.
from __future__ import annotations

from functools import lru_cache

from passlib.context import CryptContext

from cadastro.infrastructure.config import get_settings


@lru_cache(maxsize=4)
def _contexto(rounds: int) -> CryptContext:
    return CryptContext(
        schemes=["bcrypt_sha256"],
        deprecated="auto",
        bcrypt_sha256__rounds=rounds,
    )


def gerar_hash_senha(senha: str, rounds: int | None = None) -> str:
    """Gera o hash armazenavel de uma senha em texto puro.

    Args:
        senha: senha digitada pelo usuario.
        rounds: sobrescreve SENHA_BCRYPT_ROUNDS (usado em testes).
    """
    return _contexto(rounds or get_settings().senha_bcrypt_rounds).hash(senha)


def verificar_senha(senha: str, armazenado: str) -> bool:
    if not armazenado:
        return False
    try:
        return _contexto(get_settings().senha_bcrypt_rounds).verify(senha, armazenado)
    except ValueError:
        # hash que o passlib nao reconhece
        return False
