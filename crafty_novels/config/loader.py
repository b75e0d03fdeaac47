"""YAML config loading with env var expansion."""

import os
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import CraftyConfig


def load_config(cli_path: str | None = None) -> CraftyConfig:
    """Load config with resolution order: CLI > project-local > user-global > defaults."""
    config_paths = [
        Path(cli_path) if cli_path else None,
        Path("./crafty_novels.yaml"),
        Path.home() / ".crafty_novels" / "config.yaml",
    ]

    if cli_path and not config_paths[0].exists():
        raise ValueError(f"Config file not found: {cli_path}")

    for path in config_paths:
        if path and path.exists():
            try:
                with open(path, encoding="utf-8") as f:
                    raw = yaml.safe_load(f)
                if raw is None:
                    continue
                if not isinstance(raw, dict):
                    raise ValueError(f"Invalid config in {path}: expected a mapping")
                raw = _expand_env_vars(raw)
                return CraftyConfig(**raw)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {path}: {e}") from e
            except ValidationError as e:
                raise ValueError(f"Invalid config in {path}: {e}") from e

    return CraftyConfig()


def _expand_env_vars(obj: object) -> object:
    """Recursively expand ${VAR} references in strings."""
    if isinstance(obj, str):
        return re.sub(r"\$\{(\w+)\}", lambda m: os.environ.get(m.group(1), ""), obj)
    elif isinstance(obj, dict):
        return {k: _expand_env_vars(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [_expand_env_vars(v) for v in obj]
    return obj


# Default YAML template for `crafty-novels config init`
DEFAULT_CONFIG_TEMPLATE = """\
# crafty_novels.yaml

# HTML export
html:
  lang: "en"
  dir: "ltr"                     # ltr | rtl | auto
  page_class: "page"             # CSS class on each <section> page
  white_space: "break-spaces"    # break-spaces | pre-wrap | normal
  include_extra_metadata: true   # emit unknown frontmatter keys as <meta>
  viewport: true

# Output
output:
  default_format: "html"         # html | debug
  overwrite: true

# Logging
log_level: "info"                # debug | info | warn | error
"""
