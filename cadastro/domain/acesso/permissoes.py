# cadastro/domain/acesso/permissoes.py
#
# Avaliacao de permissoes para habilitar incluir/alterar/excluir/consultar.
#
# A regra de avaliacao e fixa (ver tem_permissao). O que varia por
# instalacao (qual permissao implica quais, e os perfis nomeados que o
# cadastro de usuarios oferece) e dado de configuracao em
# PoliticaPermissoes, nunca condicional embutida nem identificador especial.
from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol


class Permissao(str, Enum):
    TODAS = "all"
    CONSULTAR = "view"
    INCLUIR = "create"
    ALTERAR = "edit"
    EXCLUIR = "delete"


PERMISSOES_VALIDAS = frozenset(p.value for p in Permissao)


class TitularPermissoes(Protocol):
    """Qualquer objeto com flag de admin e conjunto de permissoes (Usuario, Sessao)."""

    @property
    def is_admin(self) -> bool: ...

    @property
    def permissoes(self) -> frozenset[str] | None: ...


@dataclass(frozen=True)
class PoliticaPermissoes:
    """Tabela de implicacoes e perfis nomeados.

    Invariantes:
      - "all" concede qualquer permissao, com ou sem entrada em implicacoes.
      - implicacoes[x] e o conjunto de permissoes concedidas por possuir x.
      - todo perfil e um subconjunto de PERMISSOES_VALIDAS.
    """

    implicacoes: Mapping[str, frozenset[str]] = field(default_factory=dict)
    perfis: Mapping[str, frozenset[str]] = field(
        default_factory=lambda: {
            "administrador": frozenset({Permissao.TODAS.value}),
            "operador": frozenset({
                Permissao.CONSULTAR.value,
                Permissao.INCLUIR.value,
                Permissao.ALTERAR.value,
            }),
            "consulta": frozenset({Permissao.CONSULTAR.value}),
        }
    )

    def concede(self, possuidas: Iterable[str], permissao: str) -> bool:
        conjunto = frozenset(possuidas)
        if Permissao.TODAS.value in conjunto:
            return True
        for p in conjunto:
            if p == permissao or permissao in self.implicacoes.get(p, frozenset()):
                return True
        return False

    def permissoes_do_perfil(self, perfil: str) -> frozenset[str]:
        try:
            return self.perfis[perfil]
        except KeyError as err:
            raise ValueError(f"Perfil desconhecido: {perfil}") from err


POLITICA_PADRAO = PoliticaPermissoes()


def tem_permissao(
    usuario: TitularPermissoes | None,
    permissao: Permissao | str,
    politica: PoliticaPermissoes = POLITICA_PADRAO,
) -> bool:
    """Ordem de avaliacao:

    1. sem usuario -> False
    2. admin -> True, independente do conjunto
    3. conjunto vazio/ausente -> False
    4. "all" no conjunto concede qualquer permissao, inclusive fora do enum
    5. permissao no conjunto, ou implicada por outra conforme a politica
    """
    if usuario is None:
        return False
    if usuario.is_admin:
        return True
    if not usuario.permissoes:
        return False
    valor = permissao.value if isinstance(permissao, Permissao) else permissao
    return politica.concede(usuario.permissoes, valor)


def normalizar_permissoes(permissoes: Iterable[str]) -> frozenset[str]:
    """Valida contra PERMISSOES_VALIDAS. Levanta ValueError para valores desconhecidos."""
    conjunto = frozenset(p.strip().lower() for p in permissoes)
    desconhecidas = conjunto - PERMISSOES_VALIDAS
    if desconhecidas:
        raise ValueError(f"Permissoes desconhecidas: {sorted(desconhecidas)}")
    return conjunto
