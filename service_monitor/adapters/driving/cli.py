"""Command-line interface."""

import asyncio
import logging
from enum import Enum
from typing import Optional

import typer

from service_monitor.adapters.driven.config.settings import DEFAULT_INTERVAL
from service_monitor.main import main

__all__ = ["AlertMode", "ProbeMode", "app", "parse_server_app_pair", "split_server_values"]

logger = logging.getLogger(__name__)

app = typer.Typer(add_completion=False, help="Monitors servers and applications.")

SERVERS_HINT = "'--servers' / '-s'"


class ProbeMode(str, Enum):
    auto = "auto"
    ping = "ping"
    http = "http"


class AlertMode(str, Enum):
    every_cycle = "every-cycle"
    on_change = "on-change"


def parse_server_app_pair(s: str) -> tuple[str, str]:
    """Parse a "server,app" pair.

    Args:
        s: Raw pair, e.g. "chat.com,Chat App".

    Returns:
        (server, app) tuple.

    Raises:
        ValueError: If the input is not exactly two comma-separated parts.
    """
    parts = s.split(",")
    if len(parts) != 2:
        raise ValueError(f"Invalid server-app pair format: '{s}'. Expected 'server,app'")
    return parts[0], parts[1]


def split_server_values(values: list[str]) -> list[str]:
    """Split --servers values on blanks into "server,app" tokens.

    A word without a comma continues the label of the token before it, so
    "chat.com,Chat App dns.google,DNS" gives "chat.com,Chat App" and
    "dns.google,DNS".

    Args:
        values: Raw values, one per shell word or quoted group.

    Returns:
        Tokens in input order.
    """
    tokens: list[str] = []
    for value in values:
        for word in value.split():
            if tokens and "," not in word:
                tokens[-1] = f"{tokens[-1]} {word}"
            else:
                tokens.append(word)
    return tokens


def _to_pairs(values: list[str]) -> list[tuple[str, str]]:
    try:
        return [parse_server_app_pair(token) for token in split_server_values(values)]
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint=SERVERS_HINT) from e


@app.command(context_settings={"allow_extra_args": True})
def run(
    ctx: typer.Context,
    servers: Optional[list[str]] = typer.Option(
        None,
        "--servers",
        "-s",
        help='Servers and apps as "server,app", separated by spaces. May be repeated.',
    ),
    interval: int = typer.Option(
        DEFAULT_INTERVAL, "--interval", "-i", help="Seconds to wait between refreshes."
    ),
    probe: ProbeMode = typer.Option(
        ProbeMode.auto,
        "--probe",
        case_sensitive=False,
        help="Probe strategy: auto (URLs over HTTP, hosts by ping), ping or http.",
    ),
    alert_mode: AlertMode = typer.Option(
        AlertMode.every_cycle,
        "--alert-mode",
        case_sensitive=False,
        help="every-cycle re-alerts while a server is down; on-change alerts once per status change.",
    ),
    concurrency: int = typer.Option(
        1, "--concurrency", "-c", help="Maximum servers probed at the same time."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging."),
) -> None:
    """Probe servers periodically, show a status table and alert on failures."""
    # Pairs after the first "-s" word arrive as extra arguments
    extra = list(ctx.args)
    if extra and not servers:
        raise typer.BadParameter(
            f"Unexpected argument(s): {' '.join(extra)}", param_hint=SERVERS_HINT
        )
    pairs = _to_pairs([*(servers or []), *extra])

    try:
        exit_code = asyncio.run(
            main(
                servers=pairs or None,
                interval_in_sec=interval,
                probe_mode=probe.value,
                alert_mode=alert_mode.value,
                concurrency=concurrency,
                verbose=verbose,
            )
        )
    except KeyboardInterrupt:
        logger.info("Shutdown requested by user (Ctrl+C).")
        exit_code = 0
    raise typer.Exit(code=exit_code)
