from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from dirble.proxy import ProxySource
from dirble.schema import DEFAULT_MAX_REDIRECTS, DEFAULT_MAX_THREADS, DEFAULT_WORDLIST
from dirble.validators import ALLOWED_SCHEMES


class Configuration(BaseModel):
    """Everything the scanning engine needs, fixed once parsing succeeds."""

    model_config = ConfigDict(frozen=True)

    target_uri: str
    wordlist: str = DEFAULT_WORDLIST
    extensions: Tuple[str, ...] = ("",)
    max_threads: int = Field(default=DEFAULT_MAX_THREADS, gt=0)
    proxy_enabled: bool = False
    proxy_address: str = ""
    proxy_source: ProxySource = ProxySource.UNSET
    proxy_auth_enabled: bool = False
    ignore_cert: bool = False
    show_htaccess: bool = False
    throttle: int = Field(default=0, ge=0)
    disable_recursion: bool = False
    user_agent: Optional[str] = None
    follow_redirects: bool = False
    max_redirects: int = Field(default=DEFAULT_MAX_REDIRECTS, gt=0)
    username: Optional[str] = None
    password: Optional[str] = Field(default=None, repr=False)

    @field_validator("target_uri")
    @classmethod
    def check_scheme(cls, v: str) -> str:
        if not v.startswith(ALLOWED_SCHEMES):
            raise ValueError("target_uri must start with http:// or https://")
        return v

    @field_validator("wordlist")
    @classmethod
    def check_wordlist(cls, v: str) -> str:
        if not v:
            raise ValueError("wordlist must not be empty")
        return v

    @field_validator("extensions")
    @classmethod
    def check_extensions(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        if list(v) != sorted(set(v)) or "" not in v:
            raise ValueError("extensions must be sorted, unique and include the empty extension")
        return v

    @model_validator(mode="after")
    def check_pairs(self) -> "Configuration":
        if (self.username is None) != (self.password is None):
            raise ValueError("username and password must be set together")
        if self.proxy_enabled != (self.proxy_source is not ProxySource.UNSET):
            raise ValueError("proxy_enabled must match whether a proxy decision was made")
        if (self.proxy_address == "") != (self.proxy_source in (ProxySource.UNSET, ProxySource.DISABLED)):
            raise ValueError("proxy_address may only be empty when the proxy is unset or disabled")
        if self.proxy_auth_enabled:
            raise ValueError("proxy_auth_enabled is reserved and must be False")
        return self
