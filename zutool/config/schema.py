"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

from zutool.models.common import OutputFormat

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/114.0.0.0 Safari/537.36"
)


class ApiConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = "https://zutool.jp/api"
    otenki_base_url: str = "https://ap.otenki.com/OtenkiASP/asp"
    timeout_seconds: float = Field(default=10.0, gt=0.0)
    user_agent: str = DEFAULT_USER_AGENT
    max_retries: int = Field(default=2, ge=0, le=10)
    retry_base_delay: float = Field(default=1.0, ge=0.0)


class DisplayConfig(BaseModel):
    model_config = {"extra": "forbid"}

    output_format: OutputFormat = OutputFormat.TABLE
    json_indent: int = Field(default=4, ge=0, le=8)


class ZutoolConfig(BaseModel):
    model_config = {"extra": "forbid"}

    api: ApiConfig = ApiConfig()
    display: DisplayConfig = DisplayConfig()
