import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from .constants import (
    DEFAULT_PORT,
    DEFAULT_RAILWAY_BASE_URL,
    DEFAULT_TELEGRAM_API_BASE,
    DEFAULT_TELEGRAM_TIMEOUT_SECONDS,
    REQUIRED_ENV_VARS,
)


class ConfigError(ValueError):
    """Configuração obrigatória ausente ou inválida. Impede a inicialização."""


@dataclass(frozen=True)
class Settings:
    telegram_bot_token: str
    telegram_chat_id: str
    port: int = DEFAULT_PORT
    debug_mode: bool = False
    telegram_api_base: str = DEFAULT_TELEGRAM_API_BASE
    telegram_timeout_seconds: float = DEFAULT_TELEGRAM_TIMEOUT_SECONDS
    railway_base_url: str = DEFAULT_RAILWAY_BASE_URL


def _get_bool(env: Mapping[str, str], key: str, default: str = "false") -> bool:
    return env.get(key, default).strip().lower() == "true"


def _get_number(env: Mapping[str, str], key: str, default, cast):
    raw = env.get(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw.strip())
    except ValueError:
        raise ConfigError(f"Invalid value for {key}: {raw!r}")


def load_settings(environ: Optional[Mapping[str, str]] = None, dotenv_path: Optional[str] = ".env") -> Settings:
    """Monta o Settings a partir do ambiente.

    Quando ``environ`` não é informado usa ``os.environ``, carregando antes o
    arquivo ``.env`` (se existir) sem sobrescrever variáveis já definidas.
    Levanta ConfigError listando todas as variáveis obrigatórias ausentes.
    """
    if environ is None:
        if dotenv_path and os.path.exists(dotenv_path):
            load_dotenv(dotenv_path, override=False)
        environ = os.environ

    missing = [key for key in REQUIRED_ENV_VARS if not environ.get(key, "").strip()]
    if missing:
        raise ConfigError(f"Missing required environment variables: {', '.join(missing)}")

    # PORT é o padrão do Railway; APP_PORT mantido por compatibilidade
    port_key = "PORT" if environ.get("PORT", "").strip() else "APP_PORT"

    return Settings(
        telegram_bot_token=environ["TELEGRAM_BOT_TOKEN"].strip(),
        telegram_chat_id=environ["TELEGRAM_CHAT_ID"].strip(),
        port=_get_number(environ, port_key, DEFAULT_PORT, int),
        debug_mode=_get_bool(environ, "DEBUG_MODE"),
        telegram_api_base=environ.get("TELEGRAM_API_BASE", DEFAULT_TELEGRAM_API_BASE).rstrip("/"),
        telegram_timeout_seconds=_get_number(
            environ, "TELEGRAM_TIMEOUT_SECONDS", DEFAULT_TELEGRAM_TIMEOUT_SECONDS, float
        ),
        railway_base_url=environ.get("RAILWAY_BASE_URL", DEFAULT_RAILWAY_BASE_URL).rstrip("/"),
    )
