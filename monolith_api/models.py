from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from monolith_api.utils import is_blank


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ArchiveOptions(_CamelModel):
    """Switches passed through to monolith. Defaults keep the archive small."""

    exclude_audio: bool = True
    exclude_css: bool = False
    exclude_images: bool = True
    exclude_js: bool = True
    exclude_fonts: bool = True
    exclude_videos: bool = True
    omit_frames: bool = True
    isolate: bool = False
    extract_no_script: bool = False
    mhtml: bool = False
    no_metadata: bool = False
    ignore_network_errors: bool = False
    accept_invalid_certs: bool = False
    quiet: bool = False

    timeout_seconds: int | None = None    # enforced by monolith, not by us
    user_agent: str | None = "Monolith-API/1.0"
    base_url: str | None = None
    cookies_file: str | None = None
    encoding: str | None = None

    allow_domains: list[str] = Field(default_factory=list)
    block_domains: list[str] = Field(default_factory=list)


class ArchiveRequest(_CamelModel):
    url: str | None = None
    stdin_html: str | None = None
    options: ArchiveOptions = Field(default_factory=ArchiveOptions)

    @property
    def has_source(self) -> bool:
        return not is_blank(self.url) or not is_blank(self.stdin_html)

    @property
    def uses_stdin(self) -> bool:
        # URL wins when both are given
        return is_blank(self.url) and not is_blank(self.stdin_html)


@dataclass
class ProcessResult:
    stdout: str
    stderr: str
    exit_code: int

    @property
    def ok(self) -> bool:
        return self.exit_code == 0
