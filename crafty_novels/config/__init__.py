from .loader import DEFAULT_CONFIG_TEMPLATE, load_config
from .models import (
    CraftyConfig,
    HtmlConfig,
    OutputConfig,
)

__all__ = [
    "CraftyConfig",
    "DEFAULT_CONFIG_TEMPLATE",
    "HtmlConfig",
    "OutputConfig",
    "load_config",
]
