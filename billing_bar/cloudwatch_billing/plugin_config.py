"""Key-value plugin settings shipped inside the package."""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from importlib import resources

from dotenv import dotenv_values

CONFIG_PACKAGE = "billing_bar.cloudwatch_billing"
CONFIG_RESOURCE = "resources/plugin.env"


@dataclass(frozen=True)
class PluginConfig:
    """Settings read from the embedded resource; currently just the menu icon."""

    icon: str = ""


def parse_plugin_config(text: str) -> PluginConfig:
    values = dotenv_values(stream=io.StringIO(text))
    icon = values.get("icon") or ""
    if not icon:
        logging.warning("Plugin config has no icon; the status line will be text only")
    return PluginConfig(icon=icon)


def load_plugin_config(package: str = CONFIG_PACKAGE, resource: str = CONFIG_RESOURCE) -> PluginConfig:
    text = resources.files(package).joinpath(resource).read_text(encoding="utf-8")
    return parse_plugin_config(text)
