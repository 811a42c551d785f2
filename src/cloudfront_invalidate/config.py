"""Configuration"""
from __future__ import annotations

import json

import rich
import typer

from cloudfront_invalidate.models.settings import env
from cloudfront_invalidate.utils.network import find_proxy_url

app = typer.Typer(no_args_is_help=True)
cp = rich.print


@app.command()
def show():
    """Show the effective configuration."""
    settings = env.dict()
    settings["proxy"] = find_proxy_url()
    rich.print_json(json.dumps(settings))


@app.command()
def env_file():
    """Show the .env file settings are loaded from."""
    path = env.__config__.env_file
    cp(path if path else "(no .env file found)")
