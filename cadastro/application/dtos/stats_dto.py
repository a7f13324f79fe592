from pydantic import BaseModel


class StatsDTO(BaseModel):
    totais: dict[str, int]
    contratos_ativos: int
