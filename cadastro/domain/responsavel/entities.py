# cadastro/domain/responsavel/entities.py
from __future__ import annotations

from dataclasses import dataclass

from cadastro.domain.documentos.value_objects import CPF


@dataclass(frozen=True)
class Responsavel:
    id: str
    nome: str
    cpf: CPF
    rg: str
    celular: str  # apenas digitos
