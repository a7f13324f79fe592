# cadastro/infrastructure/repositories/duckdb_entidade_repo.py
from __future__ import annotations

from cadastro.domain.documentos.value_objects import CNPJ
from cadastro.domain.entidade.entities import Entidade, TipoEntidade

from .duckdb_registro_repo import DuckDBRegistroRepo


class DuckDBEntidadeRepo(DuckDBRegistroRepo[Entidade]):
    tabela = "entidades"
    colunas = (
        "cnpj", "razao_social", "tipo_entidade", "rua", "numero", "bairro",
        "complemento", "cidade", "cep", "telefone", "outras_informacoes",
    )
    colunas_busca = ("razao_social", "tipo_entidade", "cidade")
    colunas_documento = ("cnpj",)
    ordem = "razao_social"

    def _hidratar(self, row: tuple) -> Entidade:  # type: ignore[type-arg]
        return Entidade(
            id=str(row[0]),
            cnpj=CNPJ(str(row[1])),
            razao_social=str(row[2]),
            tipo_entidade=TipoEntidade(row[3]),
            rua=str(row[4]),
            numero=str(row[5]),
            bairro=str(row[6]),
            complemento=str(row[7]) if row[7] else "",
            cidade=str(row[8]),
            cep=str(row[9]),
            telefone=str(row[10]),
            outras_informacoes=str(row[11]) if row[11] else "",
        )

    def _valores(self, e: Entidade) -> list[object]:
        return [
            e.cnpj.valor, e.razao_social, e.tipo_entidade.value, e.rua, e.numero,
            e.bairro, e.complemento, e.cidade, e.cep, e.telefone, e.outras_informacoes,
        ]
