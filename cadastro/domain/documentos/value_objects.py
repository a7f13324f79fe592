# cadastro/domain/documentos/value_objects.py
#
# CPF e CNPJ como valores imutaveis. A validacao e toda de validar_cpf /
# validar_cnpj; aqui so se guarda o resultado ja normalizado em digitos.
from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import ClassVar

from .mascaras import formatar_cnpj, formatar_cpf
from .validadores import apenas_digitos, validar_cnpj, validar_cpf


@dataclass(frozen=True, init=False)
class _Documento:
    tipo: ClassVar[str]
    _validar: ClassVar[Callable[[str], bool]]

    _valor: str = field(repr=False)

    def __init__(self, raw: str) -> None:
        digitos = apenas_digitos(raw)
        if not type(self)._validar(digitos):
            raise ValueError(f"{self.tipo} invalido: {self._descrever_invalido(digitos)}")
        object.__setattr__(self, "_valor", digitos)

    def _descrever_invalido(self, digitos: str) -> str:
        return f"{len(digitos)} digitos"

    @property
    def valor(self) -> str:
        return self._valor


@dataclass(frozen=True, init=False, repr=False)
class CNPJ(_Documento):
    tipo = "CNPJ"
    _validar = staticmethod(validar_cnpj)

    def _descrever_invalido(self, digitos: str) -> str:
        # CNPJ nao e dado pessoal, pode aparecer na mensagem
        return formatar_cnpj(digitos) or "vazio"

    @property
    def formatado(self) -> str:
        """XX.XXX.XXX/XXXX-XX"""
        return formatar_cnpj(self._valor)

    def __repr__(self) -> str:
        return f"CNPJ({self.formatado!r})"

    def __str__(self) -> str:
        return self.formatado


@dataclass(frozen=True, init=False, repr=False)
class CPF(_Documento):
    """CPF nunca aparece completo em repr/str (LGPD)."""

    tipo = "CPF"
    _validar = staticmethod(validar_cpf)

    @property
    def formatado(self) -> str:
        return formatar_cpf(self._valor)

    @property
    def mascarado(self) -> str:
        """***.XXX.XXX-**, formato usado em logs."""
        d = self._valor
        return f"***.{d[3:6]}.{d[6:9]}-**"

    def __repr__(self) -> str:
        return f"CPF({self.mascarado!r})"

    def __str__(self) -> str:
        return self.mascarado
