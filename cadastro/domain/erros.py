# cadastro/domain/erros.py
from __future__ import annotations


class RegistroNaoEncontradoError(LookupError):
    def __init__(self, registro: str, registro_id: str) -> None:
        super().__init__(f"{registro} {registro_id} nao encontrado")
        self.registro = registro
        self.registro_id = registro_id


class RegistroDuplicadoError(Exception):
    """Chave natural ja cadastrada. Categoria distinta de erro de formato."""

    def __init__(self, registro: str, campo: str, valor: object) -> None:
        super().__init__(f"{registro} duplicado: {campo}={valor}")
        self.registro = registro
        self.campo = campo
        self.valor = valor


class CredenciaisInvalidasError(Exception):
    pass


class SenhaInvalidaError(ValueError):
    pass
