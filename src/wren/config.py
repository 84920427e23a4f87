"""Application configuration.

AppConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Router and view configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = AppConfig(use_fragment=True, nav_attribute="data-nav")
    """

    # Navigation
    use_fragment: bool | None = None  # None = detect from host push-state support
    nav_attribute: str = "asc-nav"  # Links need nav_attribute="true" to be routed

    # Templates
    template_dir: str | Path = "templates"
    autoescape: bool = True

    # Views
    container_id: str = "templateContainer"
