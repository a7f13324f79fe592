# cadastro/application/dtos/campos.py
#
# Tipos de campo reutilizados pelos schemas de formulario. Cada um aplica a
# regra de dominio correspondente e devolve o valor normalizado (so digitos
# para documentos e telefones). Falhas viram ValueError, que o pydantic
# reporta como 422 com a mensagem abaixo.
from __future__ import annotations

from datetime import date
from typing import Annotated

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict

from cadastro.domain.documentos.datas import parse_data_br
from cadastro.domain.documentos.validadores import apenas_digitos, validar_cnpj, validar_cpf


def _cpf(valor: str) -> str:
    if not validar_cpf(valor):
        raise ValueError("CPF invalido")
    return apenas_digitos(valor)


def _cnpj(valor: str) -> str:
    if not validar_cnpj(valor):
        raise ValueError("CNPJ invalido")
    return apenas_digitos(valor)


def _cep(valor: str) -> str:
    digitos = apenas_digitos(valor)
    if len(digitos) != 8:
        raise ValueError("Informe o CEP valido")
    return digitos


def _telefone(valor: str) -> str:
    digitos = apenas_digitos(valor)
    if len(digitos) not in (10, 11):
        raise ValueError("Informe um telefone valido")
    return digitos


def _telefone_opcional(valor: str | None) -> str | None:
    if valor is None or not apenas_digitos(valor):
        return None
    return _telefone(valor)


def _data_br(valor: object) -> object:
    """Aceita DD/MM/AAAA alem do ISO que o pydantic ja entende."""
    if isinstance(valor, str) and "/" in valor:
        data = parse_data_br(valor)
        if data is None:
            raise ValueError("Data invalida, use DD/MM/AAAA")
        return data
    return valor


def _ano(valor: str) -> str:
    if not (valor.isdigit() and len(valor) == 4):
        raise ValueError("O ano deve ter 4 digitos")
    return valor


def _mes(valor: str) -> str:
    valor = valor.strip().zfill(2)
    if not (valor.isdigit() and 1 <= int(valor) <= 12):
        raise ValueError("Mes invalido")
    return valor


CPFCampo = Annotated[str, AfterValidator(_cpf)]
CNPJCampo = Annotated[str, AfterValidator(_cnpj)]
CEPCampo = Annotated[str, AfterValidator(_cep)]
TelefoneCampo = Annotated[str, AfterValidator(_telefone)]
TelefoneOpcional = Annotated[str | None, AfterValidator(_telefone_opcional)]
DataCampo = Annotated[date, BeforeValidator(_data_br)]
AnoCampo = Annotated[str, AfterValidator(_ano)]
MesCampo = Annotated[str, AfterValidator(_mes)]


class FormularioDTO(BaseModel):
    """Base dos schemas de entrada: textos chegam aparados."""

    model_config = ConfigDict(str_strip_whitespace=True)
