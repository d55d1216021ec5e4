import html
from datetime import datetime, timezone

from .constants import UNKNOWN


def _is_meaningful(value):
    if value is None:
        return False
    if isinstance(value, (dict, list)):
        return False
    return str(value).strip() != ""


def get_nested(data, *path, default=UNKNOWN):
    """Percorre ``data`` pela cadeia de chaves e devolve o valor como str.

    Qualquer elo ausente, nulo, vazio ou que não seja dict resulta em ``default``.
    """
    current = data
    for key in path:
        if not isinstance(current, dict):
            return default
        current = current.get(key)
    if not _is_meaningful(current):
        return default
    return str(current).strip()


def escape_html(value):
    return html.escape(str(value), quote=False)


def format_local_time(now=None):
    now = now or datetime.now().astimezone()
    return now.strftime("%Y-%m-%d %H:%M:%S")


def utc_timestamp(now=None):
    now = now or datetime.now(timezone.utc)
    return now.isoformat().replace("+00:00", "Z")
