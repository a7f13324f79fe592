import uuid
from datetime import date
from decimal import Decimal
from typing import ClassVar

from pydantic import BaseModel, Field, model_validator

from cadastro.domain.contrato.entities import Aditivo, Contrato, DocumentoContrato, EntidadeContrato, SistemaContrato
from cadastro.domain.contrato.value_objects import SituacaoContrato, TipoAditivo, TipoArquivo, ValorContrato
from cadastro.domain.documentos.value_objects import CNPJ

from .campos import AnoCampo, CNPJCampo, DataCampo, FormularioDTO, MesCampo, TelefoneOpcional


def _novo_id(valor: str | None) -> str:
    return valor or str(uuid.uuid4())


def _iso(valor: date | None) -> str | None:
    return valor.isoformat() if valor else None


class EntidadeContratoInDTO(FormularioDTO):
    id: str | None = None
    cnpj: CNPJCampo
    nome: str = Field(min_length=3)
    tipo: str = Field(min_length=2)


class SistemaContratoInDTO(FormularioDTO):
    id: str | None = None
    sigla: str = Field(min_length=2)
    nome: str = Field(min_length=3)
    valor: Decimal = Field(ge=0)
    implantado: bool = False
    data_implantacao: DataCampo | None = None
    status: str = "Ativo"


class AditivoInDTO(FormularioDTO):
    id: str | None = None
    numero: str = Field(min_length=1)
    tipo: TipoAditivo
    data_inscricao: DataCampo
    data_assinatura: DataCampo
    data_inicio_vigencia: DataCampo
    data_fim_vigencia: DataCampo
    indice_correcao: str | None = None
    valor_complemento: Decimal | None = Field(default=None, ge=0)

    @model_validator(mode="after")
    def _vigencia(self) -> "AditivoInDTO":
        if self.data_fim_vigencia < self.data_inicio_vigencia:
            raise ValueError("Fim da vigencia anterior ao inicio")
        return self


class DocumentoContratoInDTO(FormularioDTO):
    id: str | None = None
    data: DataCampo
    historico: str = Field(min_length=1)
    nome_arquivo: str = Field(min_length=1)
    tipo_arquivo: TipoArquivo
    tamanho_arquivo: int = Field(ge=0)
    caminho_arquivo: str = Field(min_length=1)


class ContratoInDTO(FormularioDTO):
    sequencial: str | None = None
    situacao: SituacaoContrato = SituacaoContrato.ATIVO
    tipo_contrato: str = Field(min_length=2)
    municipio: str = Field(min_length=2)
    codigo_ibge: str | None = Field(default=None, pattern=r"^\d{7}$")
    qtde_habitantes: int | None = Field(default=None, ge=0)
    numero_contrato: str = Field(min_length=1)
    data_contrato: DataCampo
    ano_contrato: AnoCampo
    modalidade_licitacao: str = Field(min_length=2)
    numero_processo_licitatorio: str = Field(min_length=1)
    data_assinatura: DataCampo
    data_publicacao: DataCampo | None = None
    data_inicio_vigencia: DataCampo
    data_fim_vigencia: DataCampo
    data_encerramento: DataCampo | None = None
    indice_correcao: str | None = None
    mes_indice: MesCampo | None = None
    ano_indice: AnoCampo | None = None
    valor_contrato: Decimal = Field(ge=0)
    responsavel: str = Field(min_length=3)
    nome_responsavel_contratante: str = Field(min_length=3)
    telefone_fixo: TelefoneOpcional = None
    telefone_celular: TelefoneOpcional = None
    entidades: list[EntidadeContratoInDTO] = Field(default_factory=list)
    sistemas: list[SistemaContratoInDTO] = Field(default_factory=list)
    aditivos: list[AditivoInDTO] = Field(default_factory=list)
    documentos: list[DocumentoContratoInDTO] = Field(default_factory=list)

    @model_validator(mode="after")
    def _vigencia(self) -> "ContratoInDTO":
        if self.data_fim_vigencia < self.data_inicio_vigencia:
            raise ValueError("Fim da vigencia anterior ao inicio")
        return self

    def para_dominio(self, registro_id: str) -> Contrato:
        return Contrato(
            id=registro_id,
            sequencial=self.sequencial or None,
            situacao=self.situacao,
            tipo_contrato=self.tipo_contrato,
            municipio=self.municipio,
            codigo_ibge=self.codigo_ibge,
            qtde_habitantes=self.qtde_habitantes,
            numero_contrato=self.numero_contrato,
            data_contrato=self.data_contrato,
            ano_contrato=self.ano_contrato,
            modalidade_licitacao=self.modalidade_licitacao,
            numero_processo_licitatorio=self.numero_processo_licitatorio,
            data_assinatura=self.data_assinatura,
            data_publicacao=self.data_publicacao,
            data_inicio_vigencia=self.data_inicio_vigencia,
            data_fim_vigencia=self.data_fim_vigencia,
            data_encerramento=self.data_encerramento,
            indice_correcao=self.indice_correcao or None,
            mes_indice=self.mes_indice,
            ano_indice=self.ano_indice,
            valor=ValorContrato(self.valor_contrato),
            responsavel=self.responsavel,
            nome_responsavel_contratante=self.nome_responsavel_contratante,
            telefone_fixo=self.telefone_fixo,
            telefone_celular=self.telefone_celular,
            entidades=tuple(
                EntidadeContrato(id=_novo_id(e.id), cnpj=CNPJ(e.cnpj), nome=e.nome, tipo=e.tipo)
                for e in self.entidades
            ),
            sistemas=tuple(
                SistemaContrato(
                    id=_novo_id(s.id),
                    sigla=s.sigla,
                    nome=s.nome,
                    valor=ValorContrato(s.valor),
                    status=s.status,
                    implantado=s.implantado,
                    data_implantacao=s.data_implantacao,
                )
                for s in self.sistemas
            ),
            aditivos=tuple(
                Aditivo(
                    id=_novo_id(a.id),
                    numero=a.numero,
                    tipo=a.tipo,
                    data_inscricao=a.data_inscricao,
                    data_assinatura=a.data_assinatura,
                    data_inicio_vigencia=a.data_inicio_vigencia,
                    data_fim_vigencia=a.data_fim_vigencia,
                    indice_correcao=a.indice_correcao or None,
                    valor_complemento=ValorContrato(a.valor_complemento) if a.valor_complemento is not None else None,
                )
                for a in self.aditivos
            ),
            documentos=tuple(
                DocumentoContrato(
                    id=_novo_id(d.id),
                    data=d.data,
                    historico=d.historico,
                    nome_arquivo=d.nome_arquivo,
                    tipo_arquivo=d.tipo_arquivo,
                    tamanho_arquivo=d.tamanho_arquivo,
                    caminho_arquivo=d.caminho_arquivo,
                )
                for d in self.documentos
            ),
        )


class EntidadeContratoDTO(BaseModel):
    id: str
    cnpj: str
    nome: str
    tipo: str


class SistemaContratoDTO(BaseModel):
    id: str
    sigla: str
    nome: str
    valor: str
    implantado: bool
    data_implantacao: str | None
    status: str


class AditivoDTO(BaseModel):
    id: str
    numero: str
    tipo: str
    data_inscricao: str
    data_assinatura: str
    data_inicio_vigencia: str
    data_fim_vigencia: str
    indice_correcao: str | None
    valor_complemento: str | None


class DocumentoContratoDTO(BaseModel):
    id: str
    data: str
    historico: str
    nome_arquivo: str
    tipo_arquivo: str
    tamanho_arquivo: int
    caminho_arquivo: str


class ContratoDTO(BaseModel):
    colunas_relatorio: ClassVar[tuple[tuple[str, str], ...]] = (
        ("numero_contrato", "Numero"),
        ("ano_contrato", "Ano"),
        ("municipio", "Municipio"),
        ("situacao", "Situacao"),
        ("data_inicio_vigencia", "Inicio Vigencia"),
        ("data_fim_vigencia", "Fim Vigencia"),
        ("valor_contrato", "Valor"),
    )

    id: str
    sequencial: str | None
    situacao: str
    tipo_contrato: str
    municipio: str
    codigo_ibge: str | None
    qtde_habitantes: int | None
    numero_contrato: str
    data_contrato: str
    ano_contrato: str
    modalidade_licitacao: str
    numero_processo_licitatorio: str
    data_assinatura: str
    data_publicacao: str | None
    data_inicio_vigencia: str
    data_fim_vigencia: str
    data_encerramento: str | None
    indice_correcao: str | None
    mes_indice: str | None
    ano_indice: str | None
    valor_contrato: str
    responsavel: str
    nome_responsavel_contratante: str
    telefone_fixo: str | None
    telefone_celular: str | None
    entidades: list[EntidadeContratoDTO]
    sistemas: list[SistemaContratoDTO]
    aditivos: list[AditivoDTO]
    documentos: list[DocumentoContratoDTO]

    @classmethod
    def de_dominio(cls, c: Contrato) -> "ContratoDTO":
        return cls(
            id=c.id,
            sequencial=c.sequencial,
            situacao=c.situacao.value,
            tipo_contrato=c.tipo_contrato,
            municipio=c.municipio,
            codigo_ibge=c.codigo_ibge,
            qtde_habitantes=c.qtde_habitantes,
            numero_contrato=c.numero_contrato,
            data_contrato=c.data_contrato.isoformat(),
            ano_contrato=c.ano_contrato,
            modalidade_licitacao=c.modalidade_licitacao,
            numero_processo_licitatorio=c.numero_processo_licitatorio,
            data_assinatura=c.data_assinatura.isoformat(),
            data_publicacao=_iso(c.data_publicacao),
            data_inicio_vigencia=c.data_inicio_vigencia.isoformat(),
            data_fim_vigencia=c.data_fim_vigencia.isoformat(),
            data_encerramento=_iso(c.data_encerramento),
            indice_correcao=c.indice_correcao,
            mes_indice=c.mes_indice,
            ano_indice=c.ano_indice,
            valor_contrato=str(c.valor.valor),
            responsavel=c.responsavel,
            nome_responsavel_contratante=c.nome_responsavel_contratante,
            telefone_fixo=c.telefone_fixo,
            telefone_celular=c.telefone_celular,
            entidades=[
                EntidadeContratoDTO(id=e.id, cnpj=e.cnpj.formatado, nome=e.nome, tipo=e.tipo) for e in c.entidades
            ],
            sistemas=[
                SistemaContratoDTO(
                    id=s.id,
                    sigla=s.sigla,
                    nome=s.nome,
                    valor=str(s.valor.valor),
                    implantado=s.implantado,
                    data_implantacao=_iso(s.data_implantacao),
                    status=s.status,
                )
                for s in c.sistemas
            ],
            aditivos=[
                AditivoDTO(
                    id=a.id,
                    numero=a.numero,
                    tipo=a.tipo.value,
                    data_inscricao=a.data_inscricao.isoformat(),
                    data_assinatura=a.data_assinatura.isoformat(),
                    data_inicio_vigencia=a.data_inicio_vigencia.isoformat(),
                    data_fim_vigencia=a.data_fim_vigencia.isoformat(),
                    indice_correcao=a.indice_correcao,
                    valor_complemento=str(a.valor_complemento.valor) if a.valor_complemento else None,
                )
                for a in c.aditivos
            ],
            documentos=[
                DocumentoContratoDTO(
                    id=d.id,
                    data=d.data.isoformat(),
                    historico=d.historico,
                    nome_arquivo=d.nome_arquivo,
                    tipo_arquivo=d.tipo_arquivo.value,
                    tamanho_arquivo=d.tamanho_arquivo,
                    caminho_arquivo=d.caminho_arquivo,
                )
                for d in c.documentos
            ],
        )
