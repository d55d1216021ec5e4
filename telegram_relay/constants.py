# Valores padrão das variáveis de ambiente
DEFAULT_PORT = 5000
DEFAULT_TELEGRAM_API_BASE = "https://api.telegram.org"
DEFAULT_TELEGRAM_TIMEOUT_SECONDS = 10
DEFAULT_RAILWAY_BASE_URL = "https://railway.app"

REQUIRED_ENV_VARS = ("TELEGRAM_BOT_TOKEN", "TELEGRAM_CHAT_ID")

SERVICE_NAME = "Railway to Telegram Webhook Service"

# Placeholder para qualquer campo opcional ausente no payload
UNKNOWN = "Unknown"

# Tipos de evento enviados pelo Railway
EVENT_DEPLOY = "DEPLOY"
EVENT_SERVICE = "SERVICE"

BUTTON_TEXT = "View Project"

# Mapa de status -> emoji exibido na mensagem
STATUS_EMOJIS = {
    "SUCCESS": "✅",
    "BUILDING": "⚒️",
    "DEPLOYING": "🚀",
    "CRASHED": "❌",
    "FAILED": "💥",
    "QUEUED": "⏳",
    "REMOVED": "🗑️",
    "REMOVING": "🔄",
    "SKIPPED": "⏭️",
    "INITIALIZED": "🎯",
    "WAITING": "⏸️",
    "SLEEPING": "😴",
    "AWAITING_APPROVAL": "⏰",
}
DEFAULT_STATUS_EMOJI = "ℹ️"
