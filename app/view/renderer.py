"""Jinja2 rendering of the weather page."""

from pathlib import Path

import jinja2

from app.models.view import TemplateContext

_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
_jinja_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=True,
    undefined=jinja2.StrictUndefined,
)

WEATHER_TEMPLATE = "index.html"


def render_template(template_name: str, **kwargs) -> str:
    """Render a Jinja2 template by name."""
    return _jinja_env.get_template(template_name).render(**kwargs)


def render_weather(context: TemplateContext) -> str:
    return render_template(WEATHER_TEMPLATE, **context.model_dump(mode="json"))
