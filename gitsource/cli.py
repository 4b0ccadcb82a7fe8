"""
Command-line interface for gitsource.

Provides commands for cloning repositories, inspecting branches,
deriving raw-content URLs and looking up devfile registry samples.
"""

import json
import sys
from pathlib import Path

import click

from gitsource import __version__
from gitsource.core.config import Config
from gitsource.core.exceptions import GitSourceError
from gitsource.utils.logging_config import get_logger, setup_logging

logger = get_logger(__name__)


def _fail(ctx, error):
    click.echo(f"Error: {error}", err=True)
    if ctx.obj.get("verbose"):
        import traceback
        traceback.print_exc()
    sys.exit(1)


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Enable verbose output"
)
@click.option(
    "--log-file",
    type=click.Path(),
    help="Path to log file"
)
@click.option(
    "--config", "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="JSON configuration file"
)
@click.pass_context
def cli(ctx, verbose, log_file, config_path):
    """
    gitsource

    Acquire git repositories and derive GitHub raw-content URLs.
    """
    ctx.ensure_object(dict)

    if config_path:
        Config.load_from_file(config_path)
    config = Config.load_from_env()

    verbose = verbose or config.verbose
    ctx.obj["verbose"] = verbose

    log_level = "DEBUG" if verbose else "INFO"
    setup_logging(level=log_level, log_file=Path(log_file) if log_file else None)


@cli.command()
@click.argument("url")
@click.argument("target", required=False, type=click.Path(file_okay=False))
@click.option(
    "--revision", "-r",
    default="",
    help="Branch, tag or commit to check out after cloning"
)
@click.option(
    "--token",
    envvar="GITSOURCE_TOKEN",
    default="",
    help="Access token for private repositories (or set GITSOURCE_TOKEN)"
)
@click.pass_context
def clone(ctx, url, target, revision, token):
    """
    Clone a repository into TARGET.

    TARGET defaults to a directory named after the repository inside
    the configured work directory.

    Examples:

        gitsource clone https://github.com/devfile-samples/devfile-sample-python-basic ./sample

        gitsource clone https://github.com/org/private ./private --token $TOKEN -r v1.0
    """
    from gitsource.acquisition import GitHandler, GitSource

    source = GitSource(repo_url=url, revision=revision, token=token)
    if target is None:
        name = url.rstrip("/").rsplit("/", 1)[-1]
        if name.endswith(".git"):
            name = name[: -len(".git")]
        target = Path(Config.get().work_dir) / (name or "repository")
        logger.debug(f"No target given, cloning into {target}")

    handler = GitHandler()
    try:
        handler.clone_repository(target, source)
        branch = handler.get_current_branch(target)
    except GitSourceError as e:
        _fail(ctx, e)

    click.echo(f"Cloned {source.display_url()} into {target} (branch: {branch})")


@cli.command()
@click.argument("path", type=click.Path(exists=True, file_okay=False))
@click.pass_context
def branch(ctx, path):
    """Print the current branch of a cloned repository."""
    from gitsource.acquisition import GitHandler

    try:
        click.echo(GitHandler().get_current_branch(path))
    except GitSourceError as e:
        _fail(ctx, e)


@cli.command("raw-url")
@click.argument("url")
@click.option(
    "--revision", "-r",
    default="",
    help="Branch, tag or commit (default: main)"
)
@click.option(
    "--context", "-c",
    default="",
    help="Directory inside the repository"
)
@click.pass_context
def raw_url(ctx, url, revision, context):
    """
    Convert a GitHub browse URL to a raw-content URL.

    Examples:

        gitsource raw-url https://github.com/org/repo -r v1.2 -c src
    """
    from gitsource.urls import update_git_link

    try:
        click.echo(update_git_link(url, revision, context))
    except GitSourceError as e:
        _fail(ctx, e)


@cli.command()
@click.argument("url")
@click.pass_context
def validate(ctx, url):
    """Check that URL is hosted on GitHub."""
    from gitsource.urls import validate_github_url

    try:
        validate_github_url(url)
    except GitSourceError as e:
        _fail(ctx, e)
    click.echo(f"{url} is a GitHub URL")


@cli.command()
@click.argument("path")
@click.argument("level", type=click.IntRange(min=0))
def context(path, level):
    """Print the last LEVEL components of PATH as a repository context."""
    from gitsource.urls import get_context

    click.echo(get_context(path, level))


@cli.command("sample-repo")
@click.argument("name")
@click.option(
    "--registry",
    help="Devfile registry URL (default from configuration)"
)
@click.pass_context
def sample_repo(ctx, name, registry):
    """Print the git origin of a devfile registry sample."""
    from gitsource.registry import RegistryClient

    try:
        click.echo(RegistryClient(registry).get_repo_from_registry(name))
    except GitSourceError as e:
        _fail(ctx, e)


@cli.command("sample-types")
@click.option(
    "--registry",
    help="Devfile registry URL (default from configuration)"
)
@click.option(
    "--json", "as_json",
    is_flag=True,
    help="Print the types as JSON"
)
@click.pass_context
def sample_types(ctx, registry, as_json):
    """List the devfile types of the registry samples."""
    from gitsource.registry import RegistryClient

    try:
        types = RegistryClient(registry).get_devfile_types()
    except GitSourceError as e:
        _fail(ctx, e)

    if as_json:
        click.echo(json.dumps([t.to_dict() for t in types], indent=2))
        return

    click.echo("Sample Devfile Types:")
    click.echo("-" * 40)
    for devfile_type in sorted(types, key=lambda t: t.name):
        tags = ", ".join(devfile_type.tags)
        click.echo(
            f"  {devfile_type.name}: {devfile_type.language}"
            f" / {devfile_type.project_type} [{tags}]"
        )


@cli.command()
@click.argument("url")
@click.option(
    "--token",
    envvar="GITSOURCE_TOKEN",
    default="",
    help="Bearer token (or set GITSOURCE_TOKEN)"
)
@click.option(
    "--timeout",
    type=float,
    help="Request timeout in seconds (default from configuration)"
)
@click.option(
    "--output", "-o",
    type=click.Path(dir_okay=False),
    help="Write the body to a file instead of stdout"
)
@click.pass_context
def fetch(ctx, url, token, timeout, output):
    """Download URL and print or save its body."""
    from gitsource.utils.http import fetch_endpoint

    try:
        body = fetch_endpoint(url, token=token, timeout=timeout)
    except GitSourceError as e:
        _fail(ctx, e)

    if output:
        Path(output).write_bytes(body)
        click.echo(f"Saved {len(body)} bytes to: {output}")
    else:
        click.echo(body.decode("utf-8", errors="replace"))


@cli.command()
@click.option(
    "--output", "-o",
    type=click.Path(),
    default="config.json",
    help="Output path for configuration file"
)
def init(output):
    """
    Initialize configuration file.

    Creates a default configuration file that can be customized.
    """
    Config.save_to_file(output)
    click.echo(f"Configuration saved to: {output}")


def main():
    """Entry point for the CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
