# cadastro/application/services/registro_service.py
#
# Servico generico de cadastro: orquestra repositorio (IO) e verificador de
# chave natural (puro). Um por tipo de registro, montado em dependencies.py.
#
# Invariantes:
#   - Toda inclusao/alteracao passa pelo verificador antes de gravar; o banco
#     nao tem UNIQUE nas chaves naturais.
#   - Na alteracao o proprio registro e excluido da verificacao.
#   - Inclusao gera id UUID4; ids enviados pelo cliente nao sao aceitos.
from __future__ import annotations

import uuid
from collections.abc import Callable
from typing import Any, Generic, Protocol, TypeVar

from pydantic import BaseModel

from cadastro.domain.erros import RegistroDuplicadoError, RegistroNaoEncontradoError
from cadastro.domain.registro.duplicidade import VerificadorDuplicidade
from cadastro.domain.registro.repository import RegistroRepository
from cadastro.log import log

E = TypeVar("E")
D = TypeVar("D", bound=BaseModel)


class Formulario(Protocol):
    def para_dominio(self, registro_id: str) -> Any: ...


class RegistroService(Generic[E, D]):
    def __init__(
        self,
        repo: RegistroRepository[E],
        verificador: VerificadorDuplicidade,
        de_dominio: Callable[[E], D],
    ) -> None:
        self._repo = repo
        self._verificador = verificador
        self._de_dominio = de_dominio

    @property
    def nome(self) -> str:
        return self._verificador.registro

    def listar(self, termo: str = "") -> list[D]:
        return [self._de_dominio(r) for r in self._repo.pesquisar(termo)]

    def obter(self, registro_id: str) -> D:
        return self._de_dominio(self._carregar(registro_id))

    def incluir(self, dados: Formulario) -> D:
        registro_id = str(uuid.uuid4())
        registro = self._montar(dados, registro_id, atual=None)
        self._checar_duplicidade(registro, exclude_id=None)
        self._repo.incluir(registro)
        log(f"{self.nome} incluido: {registro_id}")
        return self._de_dominio(registro)

    def alterar(self, registro_id: str, dados: Formulario) -> D:
        atual = self._carregar(registro_id)
        registro = self._montar(dados, registro_id, atual=atual)
        self._checar_duplicidade(registro, exclude_id=registro_id)
        self._repo.alterar(registro)
        log(f"{self.nome} alterado: {registro_id}")
        self._apos_alterar(atual, registro)
        return self._de_dominio(registro)

    def excluir(self, registro_id: str) -> None:
        self._carregar(registro_id)
        self._repo.excluir(registro_id)
        log(f"{self.nome} excluido: {registro_id}")
        self._apos_excluir(registro_id)

    def _carregar(self, registro_id: str) -> E:
        registro = self._repo.obter(registro_id)
        if registro is None:
            raise RegistroNaoEncontradoError(self.nome, registro_id)
        return registro

    def _checar_duplicidade(self, registro: E, exclude_id: str | None) -> None:
        if self._verificador(registro, self._repo.listar(), exclude_id):
            valor = self._verificador.chave(registro)
            raise RegistroDuplicadoError(self.nome, self._verificador.campo, valor)
        self._validar(registro)

    # --- ganchos ---------------------------------------------------------

    def _montar(self, dados: Formulario, registro_id: str, atual: E | None) -> E:
        return dados.para_dominio(registro_id)  # type: ignore[no-any-return]

    def _validar(self, registro: E) -> None:
        """Regras adicionais de duplicidade dentro do proprio registro."""

    def _apos_alterar(self, anterior: E, atual: E) -> None:
        return None

    def _apos_excluir(self, registro_id: str) -> None:
        return None
