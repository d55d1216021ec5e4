from urllib.parse import quote

from .constants import DEFAULT_RAILWAY_BASE_URL
from .detection import get_status_emoji
from .utils import escape_html, format_local_time, get_nested


def extract_deploy_info(data):
    """Extrai os campos exibidos na notificação, com placeholder para ausentes."""
    return {
        'project_name': get_nested(data, 'project', 'name'),
        'project_id': get_nested(data, 'project', 'id', default=None),
        'status': get_nested(data, 'status'),
        'environment': get_nested(data, 'environment', 'name'),
        'creator': get_nested(data, 'deployment', 'creator', 'name'),
        'deployment_id': get_nested(data, 'deployment', 'id'),
    }


def build_project_url(project_id, base_url=DEFAULT_RAILWAY_BASE_URL):
    base_url = base_url.rstrip('/')
    if project_id:
        return f"{base_url}/project/{quote(str(project_id), safe='')}/deployments"
    return base_url


def format_deploy_message(data, now=None):
    info = extract_deploy_info(data)
    raw_status = data.get('status') if isinstance(data, dict) else None
    emoji = get_status_emoji(raw_status)

    def code(value):
        return f"<code>{escape_html(value)}</code>"

    lines = [
        "<b>🚂 Railway Deployment</b>",
        "",
        f"📦 <b>Project:</b> {code(info['project_name'])}",
        f"{emoji} <b>Status:</b> {code(info['status'])}",
        f"🌳 <b>Environment:</b> {code(info['environment'])}",
        f"👨‍💻 <b>Creator:</b> {code(info['creator'])}",
        f"🆔 <b>Deployment ID:</b> {code(info['deployment_id'])}",
        f"🕐 <b>Time:</b> {code(format_local_time(now))}",
    ]
    return "\n".join(lines)


def build_deploy_notification(data, base_url=DEFAULT_RAILWAY_BASE_URL, now=None):
    """Retorna (mensagem, url do botão) para um evento DEPLOY."""
    project_id = get_nested(data, 'project', 'id', default=None)
    return format_deploy_message(data, now=now), build_project_url(project_id, base_url)
