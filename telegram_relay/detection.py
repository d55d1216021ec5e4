from .constants import EVENT_DEPLOY, EVENT_SERVICE, STATUS_EMOJIS, DEFAULT_STATUS_EMOJI


def get_event_type(data):
    """Retorna o discriminador ``type`` do payload ou None se ausente/inválido."""
    if not isinstance(data, dict):
        return None
    event_type = data.get("type")
    if event_type is None:
        return None
    event_type = str(event_type).strip()
    return event_type or None


def is_deploy_event(event_type):
    return event_type == EVENT_DEPLOY


def is_service_event(event_type):
    return event_type == EVENT_SERVICE


def get_status_emoji(status):
    if not isinstance(status, str):
        return DEFAULT_STATUS_EMOJI
    return STATUS_EMOJIS.get(status, DEFAULT_STATUS_EMOJI)
