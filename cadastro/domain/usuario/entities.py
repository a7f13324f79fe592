# cadastro/domain/usuario/entities.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from cadastro.domain.acesso.permissoes import PERMISSOES_VALIDAS, Permissao
from cadastro.domain.documentos.value_objects import CPF

PERMISSOES_PADRAO = frozenset({Permissao.CONSULTAR.value})


@dataclass(frozen=True)
class Usuario:
    """Operador do sistema. Senha guardada somente como hash."""

    id: str
    nome: str
    cpf: CPF
    senha_hash: str = field(repr=False)
    data_nascimento: date | None = None
    is_admin: bool = False
    permissoes: frozenset[str] = PERMISSOES_PADRAO

    def __post_init__(self) -> None:
        desconhecidas = self.permissoes - PERMISSOES_VALIDAS
        if desconhecidas:
            raise ValueError(f"Permissoes desconhecidas: {sorted(desconhecidas)}")
