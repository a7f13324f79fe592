# cadastro/domain/documentos/datas.py
from __future__ import annotations

import re
from datetime import date

_FORMATO_BR = re.compile(r"^(\d{2})/(\d{2})/(\d{4})$")

IDADE_MINIMA = 18


def parse_data_br(valor: str | None) -> date | None:
    """DD/MM/AAAA -> date. Retorna None se o formato ou a data forem invalidos."""
    match = _FORMATO_BR.match(valor or "")
    if match is None:
        return None
    dia, mes, ano = (int(g) for g in match.groups())
    try:
        return date(ano, mes, dia)
    except ValueError:
        return None


def validar_formato_data(valor: str | None, hoje: date | None = None) -> bool:
    """Data DD/MM/AAAA existente no calendario e nao futura."""
    data = parse_data_br(valor)
    if data is None:
        return False
    return data <= (hoje or date.today())


def idade_em(nascimento: date, hoje: date) -> int:
    idade = hoje.year - nascimento.year
    if (hoje.month, hoje.day) < (nascimento.month, nascimento.day):
        idade -= 1
    return idade


def is_maior_de_idade(nascimento: date, hoje: date | None = None) -> bool:
    return idade_em(nascimento, hoje or date.today()) >= IDADE_MINIMA
