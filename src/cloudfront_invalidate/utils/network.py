"""Proxy and CA bundle handling for the AWS clients."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping

from cloudfront_invalidate.errors import ConfigurationError

__all__ = ["PROXY_ENV_VARS", "find_proxy_url", "check_cacert"]

PROXY_ENV_VARS = ("proxy", "HTTP_PROXY", "http_proxy", "HTTPS_PROXY", "https_proxy")


def find_proxy_url(environ: Mapping[str, str] | None = None) -> str | None:
    """First proxy url set in the environment, if any."""
    environ = os.environ if environ is None else environ
    for name in PROXY_ENV_VARS:
        if environ.get(name):
            return environ[name]
    return None


def check_cacert(cacert: str | Path) -> str:
    """Return the CA bundle path, raising if the file does not exist."""
    path = Path(cacert)
    if not path.is_file():
        raise ConfigurationError(
            f"Supplied cacert option to a file that does not exist: {cacert}"
        )
    return str(path)
