"""
Credential loading from the environment or an ``.edgerc`` file.

An ``.edgerc`` file is read with ``akamai.edgegrid.EdgeRc``, one section per
set of credentials::

    [default]
    host = akab-xxxx.luna.akamaiapis.net
    client_token = akab-xxxx
    client_secret = xxxx=
    access_token = akab-xxxx
    max-body = 131072

Environment variables follow ``AKAMAI_HOST`` for the default section and
``AKAMAI_<SECTION>_HOST`` for any other section.
"""

import configparser
import os
from dataclasses import dataclass
from typing import Dict, Optional

from akamai.edgegrid import EdgeRc

from .exceptions import ConfigError

DEFAULT_MAX_BODY = 131072
DEFAULT_SECTION = "default"
DEFAULT_EDGERC = os.path.join("~", ".edgerc")

REQUIRED_OPTIONS = ("host", "client_token", "client_secret", "access_token")

# ConfigError.reason values
LOADING_FILE = "loading_file"
SECTION_DOES_NOT_EXIST = "section_does_not_exist"
REQUIRED_OPTION_EDGERC = "required_option_edgerc"
REQUIRED_OPTION_ENV = "required_option_env"
HOST_ENDS_WITH_SLASH = "host_ends_with_slash"


@dataclass
class Config:
    """EdgeGrid credentials plus the API host they are valid for."""

    host: str = ""
    client_token: str = ""
    client_secret: str = ""
    access_token: str = ""
    max_body: int = DEFAULT_MAX_BODY
    account_key: Optional[str] = None

    def __repr__(self) -> str:
        return f"Config(host={self.host!r}, account_key={self.account_key!r})"

    @classmethod
    def from_env(cls, section: str = DEFAULT_SECTION) -> "Config":
        """Load credentials from ``AKAMAI_*`` environment variables."""
        prefix = "AKAMAI_" if section == DEFAULT_SECTION else f"AKAMAI_{section.upper()}_"
        values: Dict[str, str] = {}
        for option in REQUIRED_OPTIONS:
            name = prefix + option.upper()
            value = os.environ.get(name)
            if not value:
                raise ConfigError(
                    f"required environment variable {name} is not set",
                    reason=REQUIRED_OPTION_ENV,
                )
            values[option] = value
        config = cls(
            max_body=_parse_max_body(os.environ.get(prefix + "MAX_BODY"), prefix + "MAX_BODY"),
            account_key=os.environ.get(prefix + "ACCOUNT_KEY") or None,
            **values,
        )
        config.check_host()
        return config

    @classmethod
    def from_edgerc(cls, path: str = DEFAULT_EDGERC, section: str = DEFAULT_SECTION) -> "Config":
        """Load credentials from one section of an ``.edgerc`` file."""
        path = os.path.expanduser(path)
        # EdgeRc silently skips files it cannot read
        if not os.access(path, os.R_OK):
            raise ConfigError(f"unable to read edgerc file {path}", reason=LOADING_FILE)
        try:
            edgerc = EdgeRc(path)
        except configparser.Error as exc:
            raise ConfigError(f"unable to load edgerc file {path}: {exc}", reason=LOADING_FILE) from exc

        if not edgerc.has_section(section):
            raise ConfigError(
                f"section {section!r} does not exist in {path}", reason=SECTION_DOES_NOT_EXIST
            )
        values: Dict[str, str] = {}
        for option in REQUIRED_OPTIONS:
            value = edgerc.get(section, option, raw=True, fallback="")
            if not value:
                raise ConfigError(
                    f"required option {option!r} missing from section {section!r}",
                    reason=REQUIRED_OPTION_EDGERC,
                )
            values[option] = value
        config = cls(
            max_body=_parse_max_body(_max_body_option(edgerc, section), "max-body"),
            account_key=edgerc.get(section, "account_key", raw=True, fallback=None) or None,
            **values,
        )
        config.check_host()
        return config

    def check_host(self) -> None:
        if self.host.endswith("/"):
            raise ConfigError(
                f"host {self.host!r} must not end with a slash", reason=HOST_ENDS_WITH_SLASH
            )

    @property
    def base_url(self) -> str:
        if self.host.startswith(("http://", "https://")):
            return self.host
        return f"https://{self.host}"


def _parse_max_body(raw: Optional[str], name: str) -> int:
    if not raw:
        return DEFAULT_MAX_BODY
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}", reason=LOADING_FILE) from None


def _max_body_option(edgerc: EdgeRc, section: str) -> Optional[str]:
    # files spell it max-body; EdgeRc's own default is max_body
    return edgerc.get(section, "max-body", raw=True, fallback=None) or edgerc.get(
        section, "max_body", raw=True, fallback=None
    )
