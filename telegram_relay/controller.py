import json
import logging
import time

from flask import Flask, request
from werkzeug.exceptions import HTTPException

from .config import load_settings
from .constants import BUTTON_TEXT, SERVICE_NAME
from .detection import get_event_type, is_deploy_event, is_service_event
from .formatters import build_deploy_notification
from .services import TelegramNotifier
from .utils import get_nested, utc_timestamp

logger = logging.getLogger(__name__)


def create_app(settings=None, notifier=None):
    """Cria o Flask app. Settings e notifier podem ser injetados (testes)."""
    if settings is None:
        settings = load_settings()
    if notifier is None:
        notifier = TelegramNotifier.from_settings(settings)

    app = Flask(__name__)
    started_at = time.monotonic()

    @app.before_request
    def log_request():
        logger.info(f"{request.method} {request.path}")

    @app.route('/', methods=['GET'])
    def index():
        return {
            'message': SERVICE_NAME,
            'endpoints': {
                'webhook': 'POST /webhook',
                'health': 'GET /health',
            },
        }, 200

    @app.route('/health', methods=['GET'])
    def health():
        return {
            'status': 'healthy',
            'timestamp': utc_timestamp(),
            'uptime': max(0.0, time.monotonic() - started_at),
        }, 200

    @app.route('/webhook', methods=['POST'])
    def webhook():
        data = request.get_json(force=True, silent=True)
        if settings.debug_mode:
            logger.debug(f"Received webhook: {json.dumps(data, indent=2, ensure_ascii=False)}")

        event_type = get_event_type(data)
        if event_type is None:
            logger.warning("Rejecting webhook without event type")
            return {'error': 'Invalid payload'}, 400

        if is_deploy_event(event_type):
            handle_deploy_event(data)
        elif is_service_event(event_type):
            logger.info(f"SERVICE event for project {get_nested(data, 'project', 'name')} (not notified)")
        else:
            logger.info(f"Ignoring event type {event_type}")

        return {'success': True}, 200

    @app.route('/webhook', methods=['GET'])
    def webhook_get():
        return {
            'error': 'Method Not Allowed',
            'message': 'This endpoint only accepts POST requests with a JSON body',
        }, 405

    def handle_deploy_event(data):
        message, button_url = build_deploy_notification(data, base_url=settings.railway_base_url)
        # Falha de entrega não altera a resposta ao webhook
        delivered = notifier.send_message(message, BUTTON_TEXT, button_url)
        if not delivered:
            logger.warning(f"Deploy notification not delivered for deployment {get_nested(data, 'deployment', 'id')}")
        return delivered

    @app.errorhandler(404)
    def not_found(error):
        return {'error': 'Endpoint not found'}, 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        # Apenas /webhook responde 405; nas demais rotas o método errado é 404
        if request.path != '/webhook':
            return {'error': 'Endpoint not found'}, 404
        return {
            'error': 'Method Not Allowed',
            'message': f"{request.method} is not supported on {request.path}",
        }, 405

    @app.errorhandler(Exception)
    def internal_error(error):
        if isinstance(error, HTTPException):
            return {'error': error.name}, error.code
        logger.exception("Webhook processing error")
        return {'error': 'Internal server error'}, 500

    return app
