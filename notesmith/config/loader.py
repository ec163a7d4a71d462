"""YAML config loading for notesmith."""

from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import NotesmithConfig


def load_config(cli_path: str | None = None) -> NotesmithConfig:
    """Load config with resolution order: CLI > project-local > user-global > defaults."""
    config_paths = [
        Path(cli_path) if cli_path else None,
        Path("./notesmith.yaml"),
        Path.home() / ".notesmith" / "config.yaml",
    ]

    for path in config_paths:
        if path and path.exists():
            try:
                with open(path) as f:
                    raw = yaml.safe_load(f)
                if raw is None:
                    continue
                return NotesmithConfig(**raw)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {path}: {e}") from e
            except ValidationError as e:
                raise ValueError(f"Invalid config in {path}: {e}") from e

    if cli_path:
        raise ValueError(f"Config file not found: {cli_path}")
    return NotesmithConfig()


# Default YAML template for `notesmith config init`
DEFAULT_CONFIG_TEMPLATE = """\
# notesmith.yaml

# Notes tree (repository root)
notes:
  ignored_dir_prefixes: [".", "_"]
  ignored_dir_names: ["node_modules"]
  excluded_file_names: ["README.md", "CONTRIBUTING.md"]
  readme_name: "README.md"
  images_dir_name: "_img"
  contents_heading: "## Contents"

# Generated website
website:
  docs_dir: "_website/docs"
  static_docs_dir: "_website/docs-static"
  images_dir: "_website/static/img/from-notes"
  images_url: "/img/from-notes"
  sidebars_file: "_website/sidebars.js"
  about_label: "About"
  about_items: ["about/about", "about/contributing"]

# Git
git:
  executable: "git"
  timeout: 30

# Logging
log_level: "info"              # debug | info | warn | error
"""
