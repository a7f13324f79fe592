# cadastro/domain/entidade/entities.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from cadastro.domain.documentos.value_objects import CNPJ


class TipoEntidade(str, Enum):
    PREFEITURA = "prefeitura"
    CAMARA = "camara"
    IPREM = "iprem"
    CONSORCIO = "consorcio"
    OUTROS = "outros"


@dataclass(frozen=True)
class Entidade:
    """Orgao contratante (prefeitura, camara, ...). Unica por CNPJ."""

    id: str
    cnpj: CNPJ
    razao_social: str
    tipo_entidade: TipoEntidade
    rua: str
    numero: str
    bairro: str
    cidade: str
    cep: str  # 8 digitos
    telefone: str  # 10 ou 11 digitos
    complemento: str = ""
    outras_informacoes: str = ""

    def __post_init__(self) -> None:
        stripped = self.razao_social.strip()
        if not stripped:
            raise ValueError("Razao social nao pode ser vazia")
        object.__setattr__(self, "razao_social", stripped)
