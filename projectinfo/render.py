"""HTML fragments returned by the service."""

from html import escape

from .models import ProjectInfo

GREETING = "<h1>Hello, World!</h1>"


def render_greeting() -> str:
    return GREETING


def render_project_info(info: ProjectInfo) -> str:
    return (
        "<h1>Project Info</h1>"
        "<ul>"
        f"<li>Name: <code>{escape(info.display_name, quote=False)}</code></li>"
        f"<li>ID: <code>{escape(info.project_id, quote=False)}</code></li>"
        f"<li>Number: <code>{escape(info.number, quote=False)}</code></li>"
        "</ul>"
    )


def render_error(exc: Exception) -> str:
    return f"<h1>Error getting project info: {escape(str(exc), quote=False)}</h1>"
