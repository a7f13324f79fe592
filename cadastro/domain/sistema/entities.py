# cadastro/domain/sistema/entities.py
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Modulo:
    id: str
    nome: str
    descricao: str


@dataclass(frozen=True)
class Sistema:
    """Sistema licitavel. Unico por sigla, sem diferenciar caixa."""

    id: str
    sigla: str
    nome: str
    descricao: str
    modulos: tuple[Modulo, ...] = ()
