# cadastro/domain/modalidade/entities.py
from dataclasses import dataclass


@dataclass(frozen=True)
class ModalidadeLicitacao:
    id: str
    descricao: str
    observacoes: str = ""
