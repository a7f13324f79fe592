from pydantic import BaseModel


class ValidacaoDTO(BaseModel):
    documento: str
    valido: bool
    formatado: str


class MascaraDTO(BaseModel):
    tipo: str
    valor: str
