# app/cli.py
"""
Command line entry point for the gateway server.

Flags override environment variables of the same meaning (PORT, APIKEY,
SERVICE), which in turn override values from a .env file.
"""
import argparse
import logging
import os
from typing import List, MutableMapping, Optional

from pydantic import ValidationError

from app.core.version import VERSION

logger = logging.getLogger(__name__)

# flag dest -> environment variable read by app.core.config
FLAG_ENV_VARS = {
    "port": "PORT",
    "apikey": "APIKEY",
    "service": "SERVICE",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="zeropay-gateway",
        description="HTTP front door for ZeroPay checkout sessions and x402 payments.",
    )
    parser.add_argument("--port", type=int, help="Service port (env: PORT, default 9001)")
    parser.add_argument("--apikey", help="Apikey for the payment service (env: APIKEY)")
    parser.add_argument("--service", help="ZeroPay service URL (env: SERVICE, default https://api.zpaynow.com)")
    parser.add_argument("--host", default="0.0.0.0", help="Bind address (default 0.0.0.0)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    return parser


def apply_overrides(args: argparse.Namespace, environ: MutableMapping[str, str] = os.environ) -> None:
    """Export flags that were given into the environment settings are read from."""
    for dest, env_var in FLAG_ENV_VARS.items():
        value = getattr(args, dest, None)
        if value is not None:
            environ[env_var] = str(value)


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    apply_overrides(args)

    # Settings are only loaded once the overrides are in place
    try:
        from app.core.config import get_settings
        get_settings.cache_clear()
        settings = get_settings()
    except ValidationError as e:
        parser.error(f"invalid configuration:\n{e}")

    import uvicorn
    from app.main import app

    logger.info(f"Server is running on {args.host}:{settings.PORT}")
    uvicorn.run(app, host=args.host, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
