# cadastro/infrastructure/repositories/duckdb_municipio_repo.py
from __future__ import annotations

from decimal import Decimal

from cadastro.domain.documentos.value_objects import CNPJ
from cadastro.domain.entidade.entities import TipoEntidade
from cadastro.domain.municipio.entities import EntidadeVinculada, Municipio

from .duckdb_registro_repo import DuckDBRegistroRepo

_COLUNAS_VINCULADA = ("id", "municipio_id", "cnpj", "razao_social", "tipo_entidade")


class DuckDBMunicipioRepo(DuckDBRegistroRepo[Municipio]):
    tabela = "municipios"
    colunas = ("nome", "codigo_ibge", "quantidade_habitantes", "distancia_km", "observacoes")
    colunas_busca = ("nome", "codigo_ibge")
    ordem = "nome"
    tabelas_filhas = ("municipio_entidades",)
    coluna_pai = "municipio_id"

    def _carregar(self, row: tuple) -> Municipio:  # type: ignore[type-arg]
        vinculadas = tuple(
            EntidadeVinculada(
                id=str(r[0]),
                cnpj=CNPJ(str(r[2])),
                razao_social=str(r[3]),
                tipo_entidade=TipoEntidade(r[4]),
            )
            for r in self._filhos("municipio_entidades", _COLUNAS_VINCULADA, str(row[0]), "razao_social")
        )
        return Municipio(
            id=str(row[0]),
            nome=str(row[1]),
            codigo_ibge=str(row[2]),
            quantidade_habitantes=int(row[3]),
            distancia_km=Decimal(str(row[4])),
            observacoes=str(row[5]) if row[5] else "",
            entidades_vinculadas=vinculadas,
        )

    def _valores(self, m: Municipio) -> list[object]:
        return [m.nome, m.codigo_ibge, m.quantidade_habitantes, m.distancia_km, m.observacoes]

    def _gravar_filhos(self, m: Municipio) -> None:
        self._inserir_filhos(
            "municipio_entidades",
            _COLUNAS_VINCULADA,
            [(v.id, m.id, v.cnpj.valor, v.razao_social, v.tipo_entidade.value) for v in m.entidades_vinculadas],
        )
