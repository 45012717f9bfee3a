"""Main entry point for the ipoalert command line interface."""

from __future__ import annotations

import asyncio
import json

import typer

from ipoalert import __version__
from ipoalert.core.config import IPOAlertSettings
from ipoalert.core.exceptions import ConfigValidationError, IPOAlertError
from ipoalert.core.logging import configure_logging
from ipoalert.core.notify import WhatsAppNotifier, format_message
from ipoalert.core.pipeline import IPOPipeline

DELIVERY_EXIT_CODE = 1
CONFIG_EXIT_CODE = 2


def emit_error(error: IPOAlertError) -> None:
    """Print a structured error payload to stderr."""

    typer.echo(json.dumps(error.to_payload(), ensure_ascii=False, default=str), err=True)


def create_app() -> typer.Typer:
    """Create a Typer application instance for ipoalert."""

    app = typer.Typer(add_completion=False, help="Open IPO alerts over WhatsApp")

    @app.callback()
    def main(
        ctx: typer.Context,
        log_level: str | None = typer.Option(
            None,
            "--log-level",
            help="Logging level (defaults to IPOALERT_LOG_LEVEL or INFO).",
        ),
    ) -> None:
        ctx.ensure_object(dict)
        settings = IPOAlertSettings()
        configure_logging(
            (log_level or settings.log_level).upper(),
            file_output=bool(settings.log_file),
            file_path=settings.log_file or None,
        )
        ctx.obj["settings"] = settings

    @app.command()
    def run(
        ctx: typer.Context,
        dry_run: bool = typer.Option(
            False,
            "--dry-run",
            help="Print the message instead of sending it.",
        ),
    ) -> None:
        """Fetch today's open IPOs and notify every recipient."""

        settings: IPOAlertSettings = ctx.obj["settings"]
        if not dry_run:
            try:
                settings.validate_required()
            except ConfigValidationError as exc:
                emit_error(exc)
                raise typer.Exit(code=CONFIG_EXIT_CODE) from exc

        pipeline = IPOPipeline(config=settings.source_config())
        result = pipeline.run_sync()
        message = format_message(result.open_ipos, result.reference)

        if dry_run:
            typer.echo(message)
            return

        notifier = WhatsAppNotifier.from_settings(settings, timeout=settings.request_timeout)
        deliveries = asyncio.run(notifier.broadcast(settings.recipients, message))
        delivered = sum(1 for delivery in deliveries if delivery.ok)
        typer.echo(f"Delivered to {delivered}/{len(deliveries)} recipients")
        for delivery in deliveries:
            if delivery.error is not None:
                emit_error(delivery.error)

        if deliveries and delivered == 0:
            raise typer.Exit(code=DELIVERY_EXIT_CODE)

    @app.command()
    def version() -> None:
        """Show the installed ipoalert version."""

        typer.echo(f"ipoalert version: {__version__}")

    return app


app = create_app()
