# cadastro/infrastructure/config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    duckdb_path: str
    rate_limit_per_minute: int
    debug: bool
    sessao_ttl_minutos: int
    senha_bcrypt_rounds: int
    cors_origins: tuple[str, ...]
    admin_cpf: str
    admin_senha: str
    admin_nome: str


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    origins = os.environ.get("CORS_ORIGINS", "http://localhost:5173")
    return Settings(
        duckdb_path=os.environ.get("DUCKDB_PATH", ":memory:"),
        rate_limit_per_minute=int(os.environ.get("API_RATE_LIMIT_PER_MINUTE", "60")),
        debug=os.environ.get("API_DEBUG", "false").lower() == "true",
        sessao_ttl_minutos=int(os.environ.get("SESSAO_TTL_MINUTOS", "480")),
        senha_bcrypt_rounds=int(os.environ.get("SENHA_BCRYPT_ROUNDS", "12")),
        cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()),
        admin_cpf=os.environ.get("ADMIN_CPF", ""),
        admin_senha=os.environ.get("ADMIN_SENHA", ""),
        admin_nome=os.environ.get("ADMIN_NOME", "Administrador"),
    )
