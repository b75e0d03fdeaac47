from pydantic import BaseModel, Field
from typing import Literal


class HtmlConfig(BaseModel):
    lang: str = Field(default="en", min_length=1)
    dir: Literal["ltr", "rtl", "auto"] = "ltr"
    page_class: str = Field(default="page", pattern=r"^[A-Za-z_][\w-]*$")
    white_space: Literal["break-spaces", "pre-wrap", "normal"] = "break-spaces"
    include_extra_metadata: bool = True
    viewport: bool = True


class OutputConfig(BaseModel):
    default_format: str = "html"
    overwrite: bool = True


class CraftyConfig(BaseModel):
    html: HtmlConfig = Field(default_factory=HtmlConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    log_level: Literal["debug", "info", "warn", "error"] = "info"
