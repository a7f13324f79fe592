# cadastro/domain/acesso/sessao.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from cadastro.domain.documentos.value_objects import CPF


@dataclass(frozen=True)
class Sessao:
    """Identidade e permissoes do usuario autenticado.

    Criada no login e passada explicitamente a quem precisa decidir acesso.
    Somente leitura: alterar permissoes de um usuario exige novo login.
    """

    token: str
    usuario_id: str
    nome: str
    cpf: CPF
    is_admin: bool
    permissoes: frozenset[str]
    expira_em: datetime

    def expirada(self, agora: datetime) -> bool:
        return agora >= self.expira_em
