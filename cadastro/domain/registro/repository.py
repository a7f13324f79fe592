# cadastro/domain/registro/repository.py
from __future__ import annotations

from typing import Protocol, TypeVar

E = TypeVar("E")


class RegistroRepository(Protocol[E]):
    """Contrato comum dos cadastros. Chaves naturais nao sao verificadas aqui."""

    def listar(self) -> list[E]: ...
    def pesquisar(self, termo: str) -> list[E]: ...
    def obter(self, registro_id: str) -> E | None: ...
    def incluir(self, registro: E) -> None: ...
    def alterar(self, registro: E) -> None: ...
    def excluir(self, registro_id: str) -> None: ...
    def contar(self) -> int: ...
