"""Main CLI application for feedpush."""

import logging
import sys
from importlib.metadata import distribution
from typing import Annotated

import typer

from feedpush.cli.decorators.error_handling import print_stack_trace_if_verbose
from feedpush.config.settings import PublishSettings, load_settings
from feedpush.core.errors import ConfigError
from feedpush.core.logging import setup_logging


__all__ = ["app", "main", "__version__"]


__version__ = distribution("feedpush").version

logger = logging.getLogger(__name__)


class AppContext:
    """Application context for storing shared state."""

    def __init__(
        self,
        verbose: int = 0,
        log_file: str | None = None,
        config_file: str | None = None,
        no_emoji: bool = False,
    ):
        """Initialize AppContext.

        Args:
            verbose: Verbosity level
            log_file: Path to log file
            config_file: Path to configuration file
            no_emoji: Whether to disable emoji icons
        """
        self.verbose = verbose
        self.log_file = log_file
        self.config_file = config_file
        self.use_emoji = not no_emoji
        self.settings: PublishSettings = load_settings(config_file)


app = typer.Typer(
    name="feedpush",
    help=f"""feedpush v{__version__}

Publish the packages and blobs listed in build manifests to the feed
configured for each artifact category.

Common workflows:
  • Publish:     feedpush publish manifests/ --blob-assets blobs/ --package-assets packages/ --build-id 42 --feeds-file feeds.yaml
  • Preview:     feedpush categorize manifests/build.xml
  • Inspect:     feedpush infer dotnet-sdk.zip runtime.deb""",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: Annotated[
        int,
        typer.Option(
            "-v",
            "--verbose",
            count=True,
            help="Increase verbosity (-v=INFO, -vv=DEBUG)",
        ),
    ] = 0,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Enable debug logging (equivalent to -vv)"),
    ] = False,
    log_file: Annotated[
        str | None, typer.Option("--log-file", help="Log to file")
    ] = None,
    config_file: Annotated[
        str | None,
        typer.Option("-c", "--config", help="Path to configuration file"),
    ] = None,
    no_emoji: Annotated[
        bool,
        typer.Option("--no-emoji", help="Disable emoji icons in output"),
    ] = False,
    version: Annotated[
        bool, typer.Option("--version", help="Show version and exit")
    ] = False,
) -> None:
    """feedpush build manifest publisher."""
    if version:
        print(f"feedpush v{__version__}")
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        print(ctx.get_help())
        raise typer.Exit()

    try:
        app_context = AppContext(
            verbose=verbose,
            log_file=log_file,
            config_file=config_file,
            no_emoji=no_emoji,
        )
    except ConfigError as e:
        setup_logging(log_file=log_file)
        logger.error("Configuration error: %s", e)
        raise typer.Exit(1) from e
    ctx.obj = app_context

    # CLI flags win over the configured log level
    if debug or verbose >= 2:
        log_level_name = "DEBUG"
    elif verbose == 1:
        log_level_name = "INFO"
    else:
        log_level_name = app_context.settings.log_level

    setup_logging(log_level_name=log_level_name, log_file=log_file)


def main() -> int:
    """Main CLI entry point."""
    try:
        from feedpush.cli.commands import register_all_commands

        register_all_commands(app)
        app()
        return 0

    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 0

    except Exception as e:
        logger.exception("Unexpected error: %s", e)
        print_stack_trace_if_verbose()
        return 1


if __name__ == "__main__":
    sys.exit(main())
