from pydantic import BaseModel, Field
from typing import Literal


class NotesConfig(BaseModel):
    ignored_dir_prefixes: list[str] = [".", "_"]
    ignored_dir_names: list[str] = ["node_modules"]
    excluded_file_names: list[str] = ["README.md", "CONTRIBUTING.md"]
    note_suffix: str = ".md"
    readme_name: str = "README.md"
    images_dir_name: str = "_img"
    contents_heading: str = "## Contents"


class WebsiteConfig(BaseModel):
    docs_dir: str = "_website/docs"
    static_docs_dir: str = "_website/docs-static"
    images_dir: str = "_website/static/img/from-notes"
    images_url: str = "/img/from-notes"
    sidebars_file: str = "_website/sidebars.js"
    about_label: str = "About"
    about_items: list[str] = ["about/about", "about/contributing"]


class GitConfig(BaseModel):
    executable: str = "git"
    timeout: int = 30


class NotesmithConfig(BaseModel):
    notes: NotesConfig = Field(default_factory=NotesConfig)
    website: WebsiteConfig = Field(default_factory=WebsiteConfig)
    git: GitConfig = Field(default_factory=GitConfig)
    log_level: Literal["debug", "info", "warn", "error"] = "info"
