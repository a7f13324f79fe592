# cadastro/interfaces/api/routes/cadastro_routes.py
from cadastro.application.dtos.contrato_dto import ContratoDTO, ContratoInDTO
from cadastro.application.dtos.entidade_dto import EntidadeDTO, EntidadeInDTO
from cadastro.application.dtos.indice_dto import IndiceDTO, IndiceInDTO
from cadastro.application.dtos.modalidade_dto import ModalidadeDTO, ModalidadeInDTO
from cadastro.application.dtos.municipio_dto import MunicipioDTO, MunicipioInDTO
from cadastro.application.dtos.responsavel_dto import ResponsavelDTO, ResponsavelInDTO
from cadastro.application.dtos.sistema_dto import SistemaDTO, SistemaInDTO
from cadastro.application.dtos.usuario_dto import UsuarioDTO, UsuarioInDTO
from cadastro.domain.acesso.permissoes import Permissao
from cadastro.interfaces.api.dependencies import (
    get_contrato_service,
    get_entidade_service,
    get_indice_service,
    get_modalidade_service,
    get_municipio_service,
    get_responsavel_service,
    get_sistema_service,
    get_usuario_service,
)
from cadastro.interfaces.api.routes.registro_routes import criar_router

routers = [
    criar_router("entidades", "Entidades", EntidadeInDTO, EntidadeDTO, get_entidade_service),
    criar_router("municipios", "Municipios", MunicipioInDTO, MunicipioDTO, get_municipio_service),
    criar_router("indices", "Indices de Correcao", IndiceInDTO, IndiceDTO, get_indice_service),
    criar_router("modalidades", "Modalidades de Licitacao", ModalidadeInDTO, ModalidadeDTO, get_modalidade_service),
    criar_router("responsaveis", "Responsaveis", ResponsavelInDTO, ResponsavelDTO, get_responsavel_service),
    criar_router("sistemas", "Sistemas", SistemaInDTO, SistemaDTO, get_sistema_service),
    # gestao de usuarios fica com administradores e detentores de "all"
    criar_router("usuarios", "Usuarios", UsuarioInDTO, UsuarioDTO, get_usuario_service, gestao=Permissao.TODAS),
    criar_router("contratos", "Contratos", ContratoInDTO, ContratoDTO, get_contrato_service),
]
