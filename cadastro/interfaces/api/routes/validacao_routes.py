# cadastro/interfaces/api/routes/validacao_routes.py
#
# Validacao e mascara sob demanda para o formulario. Publicas: nao tocam o
# banco nem revelam dados cadastrados.
from fastapi import APIRouter, HTTPException

from cadastro.application.dtos.validacao_dto import MascaraDTO, ValidacaoDTO
from cadastro.domain.documentos.mascaras import MASCARAS, cnpj_mask, cpf_mask, formatar_cnpj, formatar_cpf
from cadastro.domain.documentos.validadores import validar_cnpj, validar_cpf

router = APIRouter(tags=["Validacao"])

_DOCUMENTOS = {
    "cpf": (validar_cpf, formatar_cpf, cpf_mask),
    "cnpj": (validar_cnpj, formatar_cnpj, cnpj_mask),
}


@router.get("/validacao/{documento}", response_model=ValidacaoDTO)
def validar_documento(documento: str, valor: str = "") -> ValidacaoDTO:
    if documento not in _DOCUMENTOS:
        raise HTTPException(status_code=404, detail=f"Documento desconhecido: {documento}")
    validar, formatar, mascarar = _DOCUMENTOS[documento]
    valido = validar(valor)
    return ValidacaoDTO(
        documento=documento,
        valido=valido,
        formatado=formatar(valor) if valido else mascarar(valor),
    )


@router.get("/mascaras/{tipo}", response_model=MascaraDTO)
def aplicar_mascara(tipo: str, valor: str = "") -> MascaraDTO:
    mascara = MASCARAS.get(tipo)
    if mascara is None:
        raise HTTPException(status_code=404, detail=f"Mascara desconhecida: {tipo}")
    return MascaraDTO(tipo=tipo, valor=mascara(valor))
