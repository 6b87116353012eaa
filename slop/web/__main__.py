"""Entry point for the web server.

Usage:
    python -m slop.web [--port PORT] [--host HOST] [--config FILE] [--mock]
"""

import argparse
import logging
import os
import sys
from pathlib import Path

from dotenv import find_dotenv, load_dotenv
from rich.console import Console
from rich.logging import RichHandler

console = Console()


def main() -> int:
    """Run the web server."""
    parser = argparse.ArgumentParser(
        description="Slop scene analysis API",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="Port to run the server on",
    )
    parser.add_argument(
        "--host",
        type=str,
        default="127.0.0.1",
        help="Host to bind to",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML config file (defaults to ./config.yaml if present)",
    )
    parser.add_argument(
        "--mock",
        action="store_true",
        help="Use the deterministic mock completion service",
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )

    args = parser.parse_args()
    load_dotenv(find_dotenv(usecwd=True))

    logging.basicConfig(
        level=args.log_level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )

    # Environment carries the settings into reload subprocesses
    if args.mock:
        os.environ["SLOP_LLM_PROVIDER"] = "mock"
    if args.config is not None:
        if not args.config.exists():
            console.print(f"[red]Config file not found: {args.config}[/red]")
            return 1
        os.environ["SLOP_CONFIG"] = str(args.config.absolute())

    # Import here to avoid loading FastAPI before parsing args
    import uvicorn
    from ..config import load_config
    from .backend.dependencies import get_config

    config = get_config()
    config.host = args.host
    config.port = args.port
    provider = load_config(args.config).llm.provider

    console.print("[bold]Starting Slop API...[/bold]")
    console.print(f"  Host: {args.host}")
    console.print(f"  Port: {args.port}")
    console.print(f"  Provider: {provider}")
    console.print(f"  URL: http://{args.host}:{args.port}")
    console.print()

    uvicorn.run(
        "slop.web.backend.app:create_app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        factory=True,
        log_config=None,
    )

    return 0


if __name__ == "__main__":
    sys.exit(main())
