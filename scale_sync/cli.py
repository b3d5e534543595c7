"""Command line entry point: ``scale-sync -m sync``."""

from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

import click

from .errors import ConfigError, ScaleSyncError
from .models.body import SyncReport
from .platform import (
    open_http_client,
    provide_fitbit_auth,
    provide_healthplanet_auth,
    provide_sync_coordinator,
)
from .settings import Settings, load_settings

logger = logging.getLogger(__name__)

MODES = ("sync", "dry-sync", "init_healthplanet", "init_fitbit")

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_CONFIG = 2
EXIT_INIT_HEALTHPLANET = 10
EXIT_INIT_FITBIT = 11
EXIT_SYNC = 12
EXIT_DRY_SYNC = 13

_FAILURE_CODES = {
    "init_healthplanet": EXIT_INIT_HEALTHPLANET,
    "init_fitbit": EXIT_INIT_FITBIT,
    "sync": EXIT_SYNC,
    "dry-sync": EXIT_DRY_SYNC,
}


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


async def run_init_healthplanet(settings: Settings) -> None:
    async with open_http_client(settings) as http_client:
        await provide_healthplanet_auth(settings, http_client).init_token()


async def run_init_fitbit(settings: Settings) -> None:
    async with open_http_client(settings) as http_client:
        await provide_fitbit_auth(settings, http_client).init_token()


async def run_sync(settings: Settings, *, dry_run: bool) -> SyncReport:
    async with open_http_client(settings) as http_client:
        coordinator = await provide_sync_coordinator(settings, http_client)
        return await coordinator.sync(dry_run=dry_run)


def _run_mode(mode: str, settings: Settings) -> None:
    if mode == "init_healthplanet":
        asyncio.run(run_init_healthplanet(settings))
    elif mode == "init_fitbit":
        asyncio.run(run_init_fitbit(settings))
    elif mode == "sync":
        report = asyncio.run(run_sync(settings, dry_run=False))
        click.echo(f"Sync success ({report.written} record(s) added)")
    elif mode == "dry-sync":
        report = asyncio.run(run_sync(settings, dry_run=True))
        for record in report.candidates:
            click.echo(f"Would add: {record}")
        click.echo(f"Dry sync success ({len(report.candidates)} record(s) to add)")


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "-m",
    "--mode",
    type=click.Choice(MODES),
    required=True,
    help="Operation to run.",
)
@click.option(
    "-c",
    "--config",
    "config_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="JSON config file (default: ./config.json when present).",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def cli(mode: str, config_file: Optional[Path], verbose: bool) -> int:
    """Copy Health Planet body measurements that Fitbit does not have yet."""

    configure_logging(verbose)

    try:
        settings = load_settings(config_file)
    except ConfigError as exc:
        click.echo(str(exc), err=True)
        return EXIT_CONFIG

    try:
        _run_mode(mode, settings)
    except ScaleSyncError as exc:
        logger.debug("%s failed", mode, exc_info=True)
        click.echo(str(exc), err=True)
        return _FAILURE_CODES[mode]
    except click.exceptions.Abort:
        click.echo("Aborted!", err=True)
        return _FAILURE_CODES[mode]
    return EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    """Invoke the Click command and translate its outcome to an exit code."""
    args = list(argv) if argv is not None else None

    try:
        result = cli.main(args=args, prog_name="scale-sync", standalone_mode=False)
    except click.exceptions.Exit as exc:  # pragma: no cover - --help path
        return exc.exit_code
    except click.exceptions.Abort:
        click.echo("Aborted!", err=True)
        return EXIT_USAGE
    except click.ClickException as exc:
        exc.show()
        return EXIT_USAGE
    return result if isinstance(result, int) else EXIT_OK


if __name__ == "__main__":  # pragma: no cover - convenience execution path
    sys.exit(main(sys.argv[1:]))
