# cadastro/domain/contrato/entities.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from cadastro.domain.documentos.value_objects import CNPJ

from .value_objects import SituacaoContrato, TipoAditivo, TipoArquivo, ValorContrato


def _checar_vigencia(inicio: date, fim: date) -> None:
    if fim < inicio:
        raise ValueError("Fim da vigencia anterior ao inicio")


@dataclass(frozen=True)
class EntidadeContrato:
    id: str
    cnpj: CNPJ
    nome: str
    tipo: str


@dataclass(frozen=True)
class SistemaContrato:
    id: str
    sigla: str
    nome: str
    valor: ValorContrato
    status: str
    implantado: bool = False
    data_implantacao: date | None = None


@dataclass(frozen=True)
class Aditivo:
    id: str
    numero: str
    tipo: TipoAditivo
    data_inscricao: date
    data_assinatura: date
    data_inicio_vigencia: date
    data_fim_vigencia: date
    indice_correcao: str | None = None
    valor_complemento: ValorContrato | None = None

    def __post_init__(self) -> None:
        _checar_vigencia(self.data_inicio_vigencia, self.data_fim_vigencia)


@dataclass(frozen=True)
class DocumentoContrato:
    """Metadados de um arquivo anexado. O conteudo fica no armazenamento
    externo, apontado por caminho_arquivo.
    """

    id: str
    data: date
    historico: str
    nome_arquivo: str
    tipo_arquivo: TipoArquivo
    tamanho_arquivo: int
    caminho_arquivo: str

    def __post_init__(self) -> None:
        if not self.historico.strip():
            raise ValueError("Informe o historico do documento")
        if self.tamanho_arquivo < 0:
            raise ValueError("Tamanho de arquivo negativo")


@dataclass(frozen=True)
class Contrato:
    """Aggregate Root. Entidades, sistemas, aditivos e documentos so existem dentro do contrato.

    Unico pela combinacao numero_contrato + ano_contrato.
    """

    id: str
    situacao: SituacaoContrato
    tipo_contrato: str
    municipio: str
    numero_contrato: str
    ano_contrato: str
    data_contrato: date
    modalidade_licitacao: str
    numero_processo_licitatorio: str
    data_assinatura: date
    data_inicio_vigencia: date
    data_fim_vigencia: date
    valor: ValorContrato
    responsavel: str
    nome_responsavel_contratante: str
    sequencial: str | None = None
    codigo_ibge: str | None = None
    qtde_habitantes: int | None = None
    data_publicacao: date | None = None
    data_encerramento: date | None = None
    indice_correcao: str | None = None
    mes_indice: str | None = None
    ano_indice: str | None = None
    telefone_fixo: str | None = None
    telefone_celular: str | None = None
    entidades: tuple[EntidadeContrato, ...] = ()
    sistemas: tuple[SistemaContrato, ...] = ()
    aditivos: tuple[Aditivo, ...] = ()
    documentos: tuple[DocumentoContrato, ...] = ()

    def __post_init__(self) -> None:
        _checar_vigencia(self.data_inicio_vigencia, self.data_fim_vigencia)
