"""Kida environment setup for views.

Creates a kida Environment from wren's AppConfig. The environment is
created once, when the orchestrator is set up, and shared by every view.
"""

from collections.abc import Mapping

from kida import DictLoader, Environment, FileSystemLoader

from wren.config import AppConfig


def create_environment(
    config: AppConfig,
    templates: Mapping[str, str] | None = None,
) -> Environment:
    """Create a kida Environment from configuration.

    Templates load from ``config.template_dir`` unless *templates* maps
    names to in-memory sources, which is handy for tests and small apps.
    """
    if templates is not None:
        loader = DictLoader(dict(templates))
    else:
        loader = FileSystemLoader(str(config.template_dir))
    return Environment(loader=loader, autoescape=config.autoescape)


def render_template(env: Environment, name: str, context: Mapping[str, object]) -> str:
    """Render a template to string."""
    template = env.get_template(name)
    return template.render(dict(context))
