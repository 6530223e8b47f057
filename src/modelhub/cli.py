"""CLI interface for modelhub"""

import json
import logging
from pathlib import Path
from typing import Optional

import click

from modelhub.application.model_resolver import ModelConfigResolver
from modelhub.domain.errors import ModelHubError
from modelhub.domain.models.provider_id import ProviderId
from modelhub.domain.models.request_context import RequestContext
from modelhub.infrastructure.config.config_manager import ConfigManager
from modelhub.infrastructure.llm.registry import build_registry

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Setup logging configuration"""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )
    logging.getLogger().setLevel(level)


def _die(message: str, verbose: bool = False, exc: Optional[Exception] = None) -> None:
    """Exit with a user-friendly error message"""
    if exc is not None:
        logger.error(message, exc_info=verbose)
    else:
        logger.error(message)
    raise click.ClickException(message)


def _create_resolver(ctx) -> ModelConfigResolver:
    """Create resolver backed by the config file

    Args:
        ctx: Click context holding config_path and verbose

    Returns:
        ModelConfigResolver instance
    """
    config_manager = ConfigManager(config_path=ctx.obj.get("config_path"))
    registry = build_registry(config_manager.get_providers_config())
    return ModelConfigResolver(registry, config_manager.snapshot)


def _request_context(model_name: str, provider: Optional[str]) -> RequestContext:
    return RequestContext(
        model_name=model_name,
        provider=ProviderId(provider) if provider else None,
    )


provider_option = click.option(
    "--provider",
    type=click.Choice(ProviderId.names()),
    help="LLM provider to use. Overrides config.",
)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option(
    "--config",
    type=click.Path(exists=True, path_type=Path),
    help="Path to .modelhub.yml config file",
)
@click.pass_context
def cli(ctx, verbose: bool, config: Path):
    """modelhub - pick a chat model provider and build its client"""
    ctx.ensure_object(dict)
    setup_logging(verbose)
    ctx.obj["config_path"] = config
    ctx.obj["verbose"] = verbose


@cli.command()
@click.pass_context
def providers(ctx):
    """List supported LLM providers."""
    verbose = ctx.obj.get("verbose", False)
    try:
        config_manager = ConfigManager(config_path=ctx.obj.get("config_path"))
        registry = build_registry(config_manager.get_providers_config())
    except ModelHubError as e:
        _die(str(e), verbose=verbose, exc=e)

    for provider in registry.provider_ids():
        click.echo(provider.value)


@cli.command()
@click.argument("model_name", type=str)
@provider_option
@click.option("--json", "as_json", is_flag=True, help="Print result as JSON")
@click.pass_context
def resolve(ctx, model_name: str, provider: str, as_json: bool):
    """Show the provider and model config a request would use.

    MODEL_NAME: Model requested (e.g. 'gpt-4')
    """
    verbose = ctx.obj.get("verbose", False)
    try:
        resolver = _create_resolver(ctx)
        resolved_provider, config = resolver.resolve(_request_context(model_name, provider))
    except ModelHubError as e:
        _die(str(e), verbose=verbose, exc=e)

    if as_json:
        click.echo(json.dumps({"provider": resolved_provider.value, "config": config.to_dict()}, indent=2))
        return

    click.echo(f"Provider: {resolved_provider.value}")
    for key, value in config.to_dict().items():
        click.echo(f"  {key}: {value}")


@cli.command()
@click.argument("model_name", type=str)
@click.argument("prompt", type=str)
@provider_option
@click.pass_context
def ask(ctx, model_name: str, prompt: str, provider: str):
    """Send a single prompt to the resolved chat model.

    MODEL_NAME: Model requested (e.g. 'gpt-4')
    PROMPT: Prompt text
    """
    verbose = ctx.obj.get("verbose", False)
    try:
        resolver = _create_resolver(ctx)
        client = resolver.get_client(_request_context(model_name, provider))
        click.echo(client.generate(prompt))
    except click.ClickException:
        raise
    except ModelHubError as e:
        _die(str(e), verbose=verbose, exc=e)
    except Exception as e:
        _die(f"Fatal error: {e}", verbose=verbose, exc=e)


def main():
    """Main entry point"""
    cli(obj={})


if __name__ == "__main__":
    main()
