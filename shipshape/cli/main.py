# shipshape/cli/main.py
"""Main CLI entry point for shipshape"""

import logging
import os
import sys
from typing import Optional

import click
from rich.logging import RichHandler

from ..__version__ import __version__
from ..api import Deployer
from ..api.exceptions import ShipshapeError, UnsupportedPlatformError
from ..constants import (
    APP_NAME,
    LOG_FORMAT,
    ENV_ALLOW_ANY_PLATFORM,
    ENV_CONFIG_PATH,
    ENV_ENVIRONMENT,
    ENV_LOG_LEVEL,
    MSG_UNSUPPORTED_PLATFORM,
    SUPPORTED_PLATFORM,
)
from ..utils.output import console
from .utils.output import format_deploy_result, format_plan, print_error

TRUTHY = ("1", "true", "yes", "on")


def log_level(verbose: bool = False, debug: bool = False) -> int:
    """Pick the root log level from the flags or SHIPSHAPE_LOG_LEVEL

    Unknown level names fall back to WARNING.
    """
    if debug:
        return logging.DEBUG
    if verbose:
        return logging.INFO

    level = logging.getLevelName(os.environ.get(ENV_LOG_LEVEL, "WARNING").upper())
    return level if isinstance(level, int) else logging.WARNING


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """Setup logging configuration

    Args:
        verbose: Enable verbose output (INFO level)
        debug: Enable debug output (DEBUG level)
    """
    level = log_level(verbose, debug)

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[
            RichHandler(
                console=console,
                show_time=debug,
                show_path=debug,
                rich_tracebacks=True,
                tracebacks_suppress=[click]
            )
        ]
    )

    # Adjust third-party loggers
    logging.getLogger("asyncio").setLevel(logging.WARNING)
    logging.getLogger("aiofiles").setLevel(logging.WARNING)


def check_platform(platform: Optional[str] = None) -> None:
    """Refuse to run outside Windows unless explicitly allowed

    Raises:
        UnsupportedPlatformError: On any other platform
    """
    platform = platform or sys.platform
    if platform == SUPPORTED_PLATFORM:
        return
    if os.environ.get(ENV_ALLOW_ANY_PLATFORM, "").lower() in TRUTHY:
        return
    raise UnsupportedPlatformError(MSG_UNSUPPORTED_PLATFORM)


@click.command(name=APP_NAME, context_settings={"help_option_names": ["-h", "--help"]})
@click.option('-e', '--env', 'environment', envvar=ENV_ENVIRONMENT,
              help='Target environment (case-insensitive)')
@click.option('-c', '--config', 'config_file', envvar=ENV_CONFIG_PATH,
              type=click.Path(dir_okay=False), help='Configuration file')
@click.option('--dry-run', is_flag=True, help='Show the deployment plan without running it')
@click.option('--verbose', is_flag=True, help='Enable verbose output')
@click.option('-d', '--debug', is_flag=True, help='Enable debug output')
@click.option('-q', '--quiet', is_flag=True, help='Suppress all output except errors')
@click.version_option(__version__, '-v', '--version', prog_name=APP_NAME,
                      message='%(prog)s v%(version)s')
@click.pass_context
def cli(ctx, environment, config_file, dry_run, verbose, debug, quiet):
    """Deploy a build directory to a local or network destination

    Runs the preDeploy commands, empties the destination except for the
    keepList entries, copies the source into it and runs the postDeploy
    commands.

    Settings are read from shipshape.config.json. Environment-specific
    configs are read from the "environments" section and override
    defaults. If no environment is specified, the "default" section is
    used.

    Examples:

        shipshape --env DEV

        shipshape -e PROD

        shipshape --dry-run -e prod
    """
    console.quiet = quiet
    if quiet:
        logging.disable(logging.CRITICAL)
    else:
        logging.disable(logging.NOTSET)
        setup_logging(verbose=verbose, debug=debug)

    try:
        check_platform()

        deployer = Deployer(project_root=os.getcwd(), config_file=config_file, console=console)
        config = deployer.resolve(environment)

        if dry_run:
            format_plan(config, deployer.config_service.path_resolver, environment)
            return

        result = deployer.deploy_config(config)

    except ShipshapeError as e:
        console.quiet = False
        print_error(e)
        if debug:
            console.print_exception()
        ctx.exit(1)

    if verbose or debug or not result.is_success:
        console.quiet = False
        format_deploy_result(result)

    if not result.is_success:
        if debug and result.error is not None:
            console.print(repr(result.error), style="dim", highlight=False)
        ctx.exit(1)


def main():
    """Main entry point for the CLI application"""
    try:
        exit_code = cli(prog_name=APP_NAME, standalone_mode=False)

    except click.ClickException as e:
        e.show()
        sys.exit(e.exit_code)

    except (KeyboardInterrupt, click.exceptions.Abort):
        console.quiet = False
        console.print("\n[yellow]Deployment cancelled by user[/yellow]")
        sys.exit(130)

    sys.exit(exit_code or 0)


if __name__ == "__main__":
    main()
