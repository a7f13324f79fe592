# cadastro/domain/contrato/value_objects.py
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


@dataclass(frozen=True)
class ValorContrato:
    """Valor em Decimal. Nunca float. Nunca negativo."""

    valor: Decimal

    def __post_init__(self) -> None:
        if self.valor < Decimal("0"):
            raise ValueError("Valor de contrato nao pode ser negativo")


class SituacaoContrato(str, Enum):
    ATIVO = "Ativo"
    ENCERRADO = "Encerrado"


class TipoAditivo(str, Enum):
    PRORROGACAO = "Prorrogacao"
    REAJUSTE = "Reajuste"
    ACRESCIMO = "Acrescimo"
    SUPRESSAO = "Supressao"
    OUTROS = "Outros"


class TipoArquivo(str, Enum):
    """Formatos aceitos para documentos do contrato (PDF e Word)."""

    PDF = "application/pdf"
    DOC = "application/msword"
    DOCX = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
