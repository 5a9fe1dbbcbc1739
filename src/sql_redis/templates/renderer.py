"""jinja2-backed rendering of named command templates and Lua scripts.

Command templates live in a YAML mapping (``commands.yaml``) of template
name to template body. Lua scripts live under ``lua/<category>/<operation>.lua``;
the operation may be a nested path such as ``join/inner_join``.
Both are loaded once at construction.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Union

import yaml
from jinja2 import DictLoader, Environment, FileSystemLoader, StrictUndefined, TemplateError
from jinja2.exceptions import TemplateNotFound

from sql_redis.config import (
    COMMAND_TEMPLATES_FILE,
    LUA_TEMPLATE_DIR,
    LUA_TEMPLATE_SUFFIX,
    TEMPLATE_DIR,
)
from sql_redis.errors import InitializationFailure, TemplateRenderFailure


def load_command_templates(path: Path) -> Dict[str, str]:
    """Load and check the ``name -> body`` template mapping.

    Raises:
        InitializationFailure: If the file is missing, is not valid YAML, or
            is not a mapping of strings to strings.
    """
    if not path.exists():
        raise InitializationFailure(f"Command templates file not found: {path}")
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise InitializationFailure(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise InitializationFailure(f"Expected a mapping of templates in {path}")
    templates: Dict[str, str] = {}
    for name, body in data.items():
        if not isinstance(name, str) or not isinstance(body, str):
            raise InitializationFailure(f"Template {name!r} in {path} must map a name to a string")
        templates[name] = body
    return templates


class TemplateRenderer:
    """Render command templates and Lua scripts by name."""

    def __init__(self, template_dir: Optional[Union[str, Path]] = None) -> None:
        """Load templates from ``template_dir`` (defaults to the packaged set).

        The directory must contain ``commands.yaml``; a ``lua/`` subdirectory
        is optional.
        """
        if template_dir is None:
            commands_file, lua_dir = COMMAND_TEMPLATES_FILE, LUA_TEMPLATE_DIR
        else:
            base = Path(template_dir)
            commands_file = base / COMMAND_TEMPLATES_FILE.name
            lua_dir = base / LUA_TEMPLATE_DIR.relative_to(TEMPLATE_DIR)

        self._commands = load_command_templates(commands_file)
        self.env = Environment(
            loader=DictLoader(self._commands),
            undefined=StrictUndefined,
            autoescape=False,
        )
        self.lua_dir: Optional[Path] = lua_dir if lua_dir.is_dir() else None
        self.lua_env: Optional[Environment] = None
        if self.lua_dir is not None:
            self.lua_env = Environment(
                loader=FileSystemLoader(str(self.lua_dir)),
                undefined=StrictUndefined,
                autoescape=False,
                keep_trailing_newline=True,
            )
        logging.debug(
            "Loaded %d command templates from %s (lua: %s)",
            len(self._commands),
            commands_file,
            self.lua_dir,
        )

    def has_template(self, name: str) -> bool:
        return name in self._commands

    def template_names(self) -> List[str]:
        return sorted(self._commands)

    def lua_template_names(self) -> List[str]:
        """Script paths joined with ``_`` plus ``_lua``.

        ``complex/join/inner_join.lua`` is listed as ``complex_join_inner_join_lua``.
        """
        if self.lua_dir is None:
            return []
        return sorted(
            "_".join(path.relative_to(self.lua_dir).with_suffix("").parts) + "_lua"
            for path in self.lua_dir.rglob(f"*{LUA_TEMPLATE_SUFFIX}")
        )

    def render(self, name: str, context: Mapping[str, str]) -> str:
        """Render a command template.

        Raises:
            TemplateRenderFailure: If the template is missing, malformed, or
                references a variable absent from ``context``.
        """
        try:
            template = self.env.get_template(name)
            return template.render(**context)
        except TemplateNotFound as e:
            raise TemplateRenderFailure(f"Template not found: {name}", template=name) from e
        except TemplateError as e:
            raise TemplateRenderFailure(f"{name}: {e}", template=name) from e

    def render_lua(self, category: str, operation: str, context: Mapping[str, str]) -> str:
        """Render ``lua/<category>/<operation>.lua``; ``operation`` may contain ``/``."""
        name = f"{category}/{operation}{LUA_TEMPLATE_SUFFIX}"
        if self.lua_env is None:
            raise TemplateRenderFailure(f"No Lua templates available for {name}", template=name)
        try:
            return self.lua_env.get_template(name).render(**context)
        except TemplateNotFound as e:
            raise TemplateRenderFailure(f"Template not found: {name}", template=name) from e
        except TemplateError as e:
            raise TemplateRenderFailure(f"{name}: {e}", template=name) from e
