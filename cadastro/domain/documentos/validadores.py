# cadastro/domain/documentos/validadores.py
from __future__ import annotations

import re

_NAO_DIGITO = re.compile(r"[^0-9]")

PESOS_CNPJ_1 = (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
PESOS_CNPJ_2 = (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)


def apenas_digitos(raw: str | None) -> str:
    """Remove tudo que nao for digito ASCII. None vira string vazia."""
    if not raw:
        return ""
    return _NAO_DIGITO.sub("", str(raw))


def _digito_cpf(digitos: str, quantidade: int) -> int:
    """Digito verificador de CPF sobre os primeiros `quantidade` digitos.

    Peso do digito na posicao i (1-based) e (quantidade + 2 - i).
    """
    soma = sum(int(digitos[i - 1]) * (quantidade + 2 - i) for i in range(1, quantidade + 1))
    resto = (soma * 10) % 11
    return 0 if resto in (10, 11) else resto


def _digito_cnpj(digitos: str, pesos: tuple[int, ...]) -> int:
    soma = sum(int(d) * p for d, p in zip(digitos, pesos))
    resto = soma % 11
    return 0 if resto < 2 else 11 - resto


def digitos_verificadores_cpf(base: str) -> str:
    """Calcula os dois digitos verificadores para 9 digitos base."""
    d1 = _digito_cpf(base, 9)
    d2 = _digito_cpf(base + str(d1), 10)
    return f"{d1}{d2}"


def digitos_verificadores_cnpj(base: str) -> str:
    """Calcula os dois digitos verificadores para 12 digitos base."""
    d1 = _digito_cnpj(base, PESOS_CNPJ_1)
    d2 = _digito_cnpj(base + str(d1), PESOS_CNPJ_2)
    return f"{d1}{d2}"


def validar_cpf(raw: str | None) -> bool:
    """Algoritmo padrao brasileiro (modulo 11) de verificacao de CPF.

    Nunca lanca excecao: entrada vazia, com tamanho errado ou com todos os
    digitos iguais retorna False.
    """
    digitos = apenas_digitos(raw)
    if len(digitos) != 11 or len(set(digitos)) == 1:
        return False
    if _digito_cpf(digitos, 9) != int(digitos[9]):
        return False
    return _digito_cpf(digitos, 10) == int(digitos[10])


def validar_cnpj(raw: str | None) -> bool:
    """Algoritmo padrao brasileiro de verificacao de CNPJ."""
    digitos = apenas_digitos(raw)
    if len(digitos) != 14 or len(set(digitos)) == 1:
        return False
    return digitos[12:] == digitos_verificadores_cnpj(digitos[:12])
