"""CLI for the Linear to Lark bridge."""

import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console

from .common import compute_hmac_sha256
from .config import BridgeConfig

console = Console()


def _mask(value: Optional[str]) -> str:
    return '*' * len(value) if value else 'Not set'


@click.group()
def cli():
    """Linear to Lark bridge CLI."""
    pass


@cli.command()
@click.option("--host", default=None, help="Host to bind to (overrides LINEAR_BRIDGE_HOST)")
@click.option("--port", default=None, type=int, help="Port to bind to (overrides PORT)")
@click.option("--reload", is_flag=True, help="Enable auto-reload")
def serve(host, port, reload):
    """Start the webhook server."""
    try:
        config = BridgeConfig.from_env()
    except ValueError as e:
        console.print(f"❌ Failed to load configuration: {e}", style="red")
        sys.exit(1)

    host = host or config.host
    port = port or config.port

    for problem in config.validate():
        console.print(f"⚠️  {problem}", style="yellow")

    try:
        console.print("🚀 Starting Linear Lark bridge...")
        console.print(f"📡 Host: {host}")
        console.print(f"🔌 Port: {port}")
        console.print(f"🔄 Reload: {reload}")

        import uvicorn
        uvicorn.run(
            "linear_bridge.server:app",
            host=host,
            port=port,
            reload=reload,
            log_level="info"
        )

    except KeyboardInterrupt:
        console.print("⏹️  Server stopped by user")
    except Exception as e:
        console.print(f"❌ Server failed: {e}", style="red")
        sys.exit(1)


@cli.command()
def config():
    """Show current configuration."""
    try:
        config = BridgeConfig.from_env()
    except ValueError as e:
        console.print(f"❌ Failed to load configuration: {e}", style="red")
        sys.exit(1)

    console.print("📋 Linear Lark Bridge Configuration:")
    console.print(f"  Webhook Secret: {_mask(config.webhook_secret)}")
    console.print(f"  Webhook Endpoint: {config.webhook_endpoint}")
    console.print(f"  Lark Webhook URL: {config.lark_webhook_url or 'Not set'}")
    console.print(f"  Lark Signing Secret: {_mask(config.lark_signing_secret)}")
    console.print(f"  Delivery Timeout: {config.delivery_timeout}s")
    console.print(f"  Host: {config.host}")
    console.print(f"  Port: {config.port}")
    console.print(f"  Log Directory: {config.log_dir or 'console only'}")
    console.print(f"  Log Level: {config.log_level}")

    for problem in config.validate():
        console.print(f"⚠️  {problem}", style="yellow")


@cli.command()
@click.argument("payload_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--secret", default=None, help="Webhook secret (overrides LINEAR_WEBHOOK_SECRET)")
def sign(payload_file, secret):
    """Print the linear-signature header value for PAYLOAD_FILE."""
    secret = secret or BridgeConfig.from_env().webhook_secret
    if not secret:
        console.print("❌ No webhook secret given and LINEAR_WEBHOOK_SECRET is not set", style="red")
        sys.exit(1)

    click.echo(compute_hmac_sha256(payload_file.read_bytes(), secret))


if __name__ == "__main__":
    cli()
