"""CloudFront invalidation commands."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Optional, TypeVar

import rich
import typer
from rich.console import Console
from rich.markup import escape
from typer import Option
from typing_extensions import Annotated

from cloudfront_invalidate.control_plane import AwsControlPlane
from cloudfront_invalidate.dispatcher import Dispatcher
from cloudfront_invalidate.errors import InvalidationError
from cloudfront_invalidate.models.context import DeploymentContext
from cloudfront_invalidate.models.settings import env
from cloudfront_invalidate.utils.descriptor_file import DescriptorFile, load_descriptors
from cloudfront_invalidate.utils.network import check_cacert, find_proxy_url
from cloudfront_invalidate.utils.spinners import spinner

T = TypeVar("T")

ConfigType = Annotated[Optional[Path], Option("--config", "-c", help="serverless.yml or JSON file")]
StageType = Annotated[Optional[str], Option("--stage", "-s", help="Current deployment stage")]
ServiceType = Annotated[Optional[str], Option("--service", help="Service name")]
StackType = Annotated[Optional[str], Option("--stack-name", help="CloudFormation stack name")]
RegionType = Annotated[Optional[str], Option("--region", "-r")]
ProfileType = Annotated[Optional[str], Option("--profile", "-p", help="AWS profile")]
CaCertType = Annotated[Optional[Path], Option("--cacert", help="CA bundle for AWS calls")]
NoDeployType = Annotated[bool, Option("--no-deploy", help="Skip all invalidations")]
DelayType = Annotated[Optional[float], Option("--delay", help="Seconds to wait after each request")]

app = typer.Typer(no_args_is_help=True)
console = Console(soft_wrap=True)


def attempt(func: Callable[..., T], *args: Any) -> T:
    try:
        return func(*args)
    except InvalidationError as e:
        if env.verbose:
            raise
        else:
            typer.echo(f"❌  Error: {e}")
            raise SystemExit(1)


def create_client(region: str | None, profile: str | None, cacert: Path | None) -> AwsControlPlane:
    cacert_path = None
    if cacert or env.cacert:
        cacert_path = check_cacert(cacert or env.cacert)
        console.print("CloudfrontInvalidate: [yellow]ca cert handling enabled[/yellow]")

    return AwsControlPlane.create(
        region=region or env.region,
        profile=profile or env.profile,
        proxy_url=find_proxy_url(),
        cacert=cacert_path,
    )


def create_dispatcher(
    loaded: DescriptorFile,
    stage: str | None,
    service: str | None,
    stack_name: str | None,
    region: str | None,
    profile: str | None,
    cacert: Path | None,
    no_deploy: bool,
    delay: float | None,
) -> Dispatcher:
    context = DeploymentContext(
        stage=stage or env.stage or loaded.stage or "dev",
        service=service or env.service or loaded.service,
        stack_name=stack_name or env.stack_name,
    )
    return Dispatcher(
        client=create_client(region, profile, cacert),
        context=context,
        console=console,
        no_deploy=no_deploy or env.no_deploy,
        delay=env.delay if delay is None else delay,
    )


def load(config: Path | None) -> DescriptorFile:
    loaded = attempt(load_descriptors, config or Path(env.config_file), env.descriptor_key)
    for message in loaded.rejected:
        console.print(escape(message))
    return loaded


@app.command()
def run(
    config: ConfigType = None,
    stage: StageType = None,
    service: ServiceType = None,
    stack_name: StackType = None,
    region: RegionType = None,
    profile: ProfileType = None,
    cacert: CaCertType = None,
    no_deploy: NoDeployType = False,
    delay: DelayType = None,
):
    """Invalidate every configured target."""
    loaded = load(config)
    dispatcher = attempt(
        create_dispatcher,
        loaded, stage, service, stack_name, region, profile, cacert, no_deploy, delay,
    )
    dispatcher.invalidate(loaded.descriptors)


@app.command()
def after_deploy(
    config: ConfigType = None,
    stage: StageType = None,
    service: ServiceType = None,
    stack_name: StackType = None,
    region: RegionType = None,
    profile: ProfileType = None,
    cacert: CaCertType = None,
    no_deploy: NoDeployType = False,
    delay: DelayType = None,
):
    """Invalidate targets after a deploy, skipping autoInvalidate: false."""
    loaded = load(config)
    dispatcher = attempt(
        create_dispatcher,
        loaded, stage, service, stack_name, region, profile, cacert, no_deploy, delay,
    )
    dispatcher.invalidate_after_deploy(loaded.descriptors)


@app.command()
def distributions(
    origin: Annotated[Optional[list[str]], Option("--origin", "-o", help="Only show distributions with this origin")] = None,
    region: RegionType = None,
    profile: ProfileType = None,
    cacert: CaCertType = None,
):
    """List CloudFront distributions and their origins."""
    client = attempt(create_client, region, profile, cacert)

    with spinner("Listing distributions..."):
        found = attempt(client.list_distributions)

    if origin:
        found = [d for d in found if d.has_origin(origin)]

    for distribution in found:
        origins = ", ".join(o.domain_name for o in distribution.origins)
        rich.print(f"[yellow]{distribution.id}[/yellow]  {distribution.domain_name}  ({origins})")

    typer.echo(f"✅  {len(found)} distribution(s)")


@app.command()
def show(config: ConfigType = None):
    """Show the configured targets and how each is resolved."""
    loaded = load(config)

    targets = []
    for descriptor in loaded.descriptors:
        strategy = descriptor.strategy
        targets.append(
            {
                **descriptor.model_dump(by_alias=True),
                "strategy": strategy.model_dump() if strategy else None,
            }
        )

    rich.print_json(json.dumps({"service": loaded.service, "stage": loaded.stage, "targets": targets}))
