# cadastro/infrastructure/repositories/duckdb_contrato_repo.py
from __future__ import annotations

from datetime import date
from decimal import Decimal

from cadastro.domain.contrato.entities import Aditivo, Contrato, DocumentoContrato, EntidadeContrato, SistemaContrato
from cadastro.domain.contrato.value_objects import SituacaoContrato, TipoAditivo, TipoArquivo, ValorContrato
from cadastro.domain.documentos.value_objects import CNPJ

from .duckdb_registro_repo import DuckDBRegistroRepo

_COLUNAS_ENTIDADE = ("id", "contrato_id", "cnpj", "nome", "tipo")
_COLUNAS_SISTEMA = ("id", "contrato_id", "sigla", "nome", "valor", "implantado", "data_implantacao", "status")
_COLUNAS_ADITIVO = (
    "id", "contrato_id", "numero", "tipo", "data_inscricao", "data_assinatura",
    "data_inicio_vigencia", "data_fim_vigencia", "indice_correcao", "valor_complemento",
)
_COLUNAS_DOCUMENTO = (
    "id", "contrato_id", "data", "historico", "nome_arquivo", "tipo_arquivo", "tamanho_arquivo", "caminho_arquivo",
)


def _data(valor: object) -> date | None:
    return valor if isinstance(valor, date) else None


def _texto(valor: object) -> str | None:
    return str(valor) if valor else None


def _valor(valor: object) -> ValorContrato | None:
    return ValorContrato(Decimal(str(valor))) if valor is not None else None


class DuckDBContratoRepo(DuckDBRegistroRepo[Contrato]):
    tabela = "contratos"
    colunas = (
        "sequencial", "situacao", "tipo_contrato", "municipio", "codigo_ibge",
        "qtde_habitantes", "numero_contrato", "data_contrato", "ano_contrato",
        "modalidade_licitacao", "numero_processo_licitatorio", "data_assinatura",
        "data_publicacao", "data_inicio_vigencia", "data_fim_vigencia",
        "data_encerramento", "indice_correcao", "mes_indice", "ano_indice",
        "valor_contrato", "responsavel", "nome_responsavel_contratante",
        "telefone_fixo", "telefone_celular",
    )
    colunas_busca = ("numero_contrato", "municipio", "responsavel", "tipo_contrato", "modalidade_licitacao")
    ordem = "data_assinatura DESC NULLS LAST, numero_contrato"
    tabelas_filhas = ("contrato_entidades", "contrato_sistemas", "contrato_aditivos", "contrato_documentos")
    coluna_pai = "contrato_id"

    def _carregar(self, row: tuple) -> Contrato:  # type: ignore[type-arg]
        contrato_id = str(row[0])
        entidades = tuple(
            EntidadeContrato(id=str(r[0]), cnpj=CNPJ(str(r[2])), nome=str(r[3]), tipo=str(r[4]))
            for r in self._filhos("contrato_entidades", _COLUNAS_ENTIDADE, contrato_id, "nome")
        )
        sistemas = tuple(
            SistemaContrato(
                id=str(r[0]),
                sigla=str(r[2]),
                nome=str(r[3]),
                valor=ValorContrato(Decimal(str(r[4]))),
                implantado=bool(r[5]),
                data_implantacao=_data(r[6]),
                status=str(r[7]),
            )
            for r in self._filhos("contrato_sistemas", _COLUNAS_SISTEMA, contrato_id, "sigla")
        )
        aditivos = tuple(
            Aditivo(
                id=str(r[0]),
                numero=str(r[2]),
                tipo=TipoAditivo(r[3]),
                data_inscricao=r[4],
                data_assinatura=r[5],
                data_inicio_vigencia=r[6],
                data_fim_vigencia=r[7],
                indice_correcao=_texto(r[8]),
                valor_complemento=_valor(r[9]),
            )
            for r in self._filhos("contrato_aditivos", _COLUNAS_ADITIVO, contrato_id, "data_inscricao, numero")
        )
        documentos = tuple(
            DocumentoContrato(
                id=str(r[0]),
                data=r[2],
                historico=str(r[3]),
                nome_arquivo=str(r[4]),
                tipo_arquivo=TipoArquivo(r[5]),
                tamanho_arquivo=int(r[6]),
                caminho_arquivo=str(r[7]),
            )
            for r in self._filhos("contrato_documentos", _COLUNAS_DOCUMENTO, contrato_id, "data, nome_arquivo")
        )
        return Contrato(
            id=contrato_id,
            sequencial=_texto(row[1]),
            situacao=SituacaoContrato(row[2]),
            tipo_contrato=str(row[3]),
            municipio=str(row[4]),
            codigo_ibge=_texto(row[5]),
            qtde_habitantes=int(row[6]) if row[6] is not None else None,
            numero_contrato=str(row[7]),
            data_contrato=row[8],
            ano_contrato=str(row[9]),
            modalidade_licitacao=str(row[10]),
            numero_processo_licitatorio=str(row[11]),
            data_assinatura=row[12],
            data_publicacao=_data(row[13]),
            data_inicio_vigencia=row[14],
            data_fim_vigencia=row[15],
            data_encerramento=_data(row[16]),
            indice_correcao=_texto(row[17]),
            mes_indice=_texto(row[18]),
            ano_indice=_texto(row[19]),
            valor=ValorContrato(Decimal(str(row[20]))),
            responsavel=str(row[21]),
            nome_responsavel_contratante=str(row[22]),
            telefone_fixo=_texto(row[23]),
            telefone_celular=_texto(row[24]),
            entidades=entidades,
            sistemas=sistemas,
            aditivos=aditivos,
            documentos=documentos,
        )

    def _valores(self, c: Contrato) -> list[object]:
        return [
            c.sequencial, c.situacao.value, c.tipo_contrato, c.municipio, c.codigo_ibge,
            c.qtde_habitantes, c.numero_contrato, c.data_contrato, c.ano_contrato,
            c.modalidade_licitacao, c.numero_processo_licitatorio, c.data_assinatura,
            c.data_publicacao, c.data_inicio_vigencia, c.data_fim_vigencia,
            c.data_encerramento, c.indice_correcao, c.mes_indice, c.ano_indice,
            c.valor.valor, c.responsavel, c.nome_responsavel_contratante,
            c.telefone_fixo, c.telefone_celular,
        ]

    def _gravar_filhos(self, c: Contrato) -> None:
        self._inserir_filhos(
            "contrato_entidades",
            _COLUNAS_ENTIDADE,
            [(e.id, c.id, e.cnpj.valor, e.nome, e.tipo) for e in c.entidades],
        )
        self._inserir_filhos(
            "contrato_sistemas",
            _COLUNAS_SISTEMA,
            [
                (s.id, c.id, s.sigla, s.nome, s.valor.valor, s.implantado, s.data_implantacao, s.status)
                for s in c.sistemas
            ],
        )
        self._inserir_filhos(
            "contrato_aditivos",
            _COLUNAS_ADITIVO,
            [
                (
                    a.id, c.id, a.numero, a.tipo.value, a.data_inscricao, a.data_assinatura,
                    a.data_inicio_vigencia, a.data_fim_vigencia, a.indice_correcao,
                    a.valor_complemento.valor if a.valor_complemento else None,
                )
                for a in c.aditivos
            ],
        )
        self._inserir_filhos(
            "contrato_documentos",
            _COLUNAS_DOCUMENTO,
            [
                (
                    d.id, c.id, d.data, d.historico, d.nome_arquivo, d.tipo_arquivo.value,
                    d.tamanho_arquivo, d.caminho_arquivo,
                )
                for d in c.documentos
            ],
        )
