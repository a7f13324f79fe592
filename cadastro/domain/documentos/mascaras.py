# cadastro/domain/documentos/mascaras.py
#
# Mascaras de digitacao aplicadas a cada tecla pelo formulario.
#
# Todas seguem o mesmo passo a passo: remove nao-digitos, reinsere os
# separadores com substituicoes regex ordenadas (uma ocorrencia cada) e
# trunca no tamanho da mascara. Como a primeira etapa remove a pontuacao,
# aplicar a mascara sobre um valor ja mascarado devolve o mesmo valor.
# Nenhuma funcao lanca excecao: entrada parcial gera mascara parcial.
from __future__ import annotations

import re

from .validadores import apenas_digitos

_Passo = tuple[str, str]


def _aplicar(valor: str | None, passos: tuple[_Passo, ...], tamanho: int, max_digitos: int) -> str:
    # Digitos excedentes sao descartados antes das substituicoes.
    resultado = apenas_digitos(valor)[:max_digitos]
    for padrao, troca in passos:
        resultado = re.sub(padrao, troca, resultado, count=1)
    return resultado[:tamanho]


_PASSOS_CPF: tuple[_Passo, ...] = (
    (r"(\d{3})(\d)", r"\1.\2"),
    (r"(\d{3})(\d)", r"\1.\2"),
    (r"(\d{3})(\d{1,2})$", r"\1-\2"),
)

_PASSOS_CNPJ: tuple[_Passo, ...] = (
    (r"^(\d{2})(\d)", r"\1.\2"),
    (r"^(\d{2})\.(\d{3})(\d)", r"\1.\2.\3"),
    (r"\.(\d{3})(\d)", r".\1/\2"),
    (r"(\d{4})(\d)", r"\1-\2"),
)

_PASSOS_DATA: tuple[_Passo, ...] = (
    (r"(\d{2})(\d)", r"\1/\2"),
    (r"(\d{2})(\d)", r"\1/\2"),
)

_PASSOS_CEP: tuple[_Passo, ...] = ((r"^(\d{5})(\d)", r"\1-\2"),)

_DDD: _Passo = (r"^(\d{2})(\d)", r"(\1) \2")
_PASSOS_FIXO: tuple[_Passo, ...] = (_DDD, (r"(\d{4})(\d)", r"\1-\2"))
_PASSOS_CELULAR: tuple[_Passo, ...] = (_DDD, (r"(\d{5})(\d)", r"\1-\2"))


def cpf_mask(valor: str | None) -> str:
    """000.000.000-00"""
    return _aplicar(valor, _PASSOS_CPF, 14, 11)


def cnpj_mask(valor: str | None) -> str:
    """00.000.000/0000-00"""
    return _aplicar(valor, _PASSOS_CNPJ, 18, 14)


def telefone_mask(valor: str | None) -> str:
    """(00) 0000-0000 ate 10 digitos, (00) 00000-0000 com 11."""
    passos = _PASSOS_CELULAR if len(apenas_digitos(valor)) > 10 else _PASSOS_FIXO
    return _aplicar(valor, passos, 15, 11)


def data_mask(valor: str | None) -> str:
    """DD/MM/AAAA"""
    return _aplicar(valor, _PASSOS_DATA, 10, 8)


def cep_mask(valor: str | None) -> str:
    """00000-000"""
    return _aplicar(valor, _PASSOS_CEP, 9, 8)


def formatar_cpf(valor: str | None) -> str:
    """Formata CPF completo; valores com outro tamanho voltam so com digitos."""
    d = apenas_digitos(valor)
    if len(d) != 11:
        return d
    return f"{d[:3]}.{d[3:6]}.{d[6:9]}-{d[9:]}"


def formatar_cnpj(valor: str | None) -> str:
    d = apenas_digitos(valor)
    if len(d) != 14:
        return d
    return f"{d[:2]}.{d[2:5]}.{d[5:8]}/{d[8:12]}-{d[12:]}"


MASCARAS = {
    "cpf": cpf_mask,
    "cnpj": cnpj_mask,
    "telefone": telefone_mask,
    "data": data_mask,
    "cep": cep_mask,
}
