import logging
import signal
import sys

from telegram_relay.config import ConfigError, load_settings
from telegram_relay.controller import create_app

logger = logging.getLogger("telegram_relay")


def _shutdown(signum, frame):
    logger.info(f"{signal.Signals(signum).name} received, shutting down gracefully")
    sys.exit(0)


def main():
    try:
        settings = load_settings()
    except ConfigError as exc:
        logging.basicConfig(level=logging.ERROR)
        logger.error(str(exc))
        sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if settings.debug_mode else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    signal.signal(signal.SIGTERM, _shutdown)
    signal.signal(signal.SIGINT, _shutdown)

    app = create_app(settings)
    logger.info(f"🚀 Railway-to-Telegram webhook server listening on port {settings.port}")
    logger.info("📡 Webhook URL: /webhook")
    logger.info("❤️ Health check: /health")
    app.run(host='0.0.0.0', port=settings.port, debug=settings.debug_mode, use_reloader=False)


if __name__ == '__main__':
    main()
