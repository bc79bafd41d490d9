"""
Command-line front end: read stdin, publish it, print the URLs.

Exit codes:
    0  success (including empty input, which sends nothing)
    1  server refused the paste
    2  invalid option
    3  invalid key material
    4  server answer not understood
    5  server unreachable
    6  any other paste error
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import BinaryIO, List, Optional

from .client import PasteClient
from .config import ServerConfig
from .keys import is_blank_password
from .models import Expiration, Formatter, PasteOptions, Protocol
from .transport import Transport
from .types import (
    PasteError,
    ValidationError,
    InvalidKeyMaterial,
    TransportError,
    ProtocolError,
    ApplicationRejected,
)

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_OTHER = 6

EXIT_CODES = {
    ApplicationRejected: 1,
    ValidationError: 2,
    InvalidKeyMaterial: 3,
    ProtocolError: 4,
    TransportError: 5,
}


def exit_code_for(error: PasteError) -> int:
    """Process exit status for a pipeline error."""
    for cls in type(error).__mro__:
        if cls in EXIT_CODES:
            return EXIT_CODES[cls]
    return EXIT_OTHER


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="privatebin-cli",
        description="Send a paste read from standard input to a PrivateBin server.",
        epilog=(
            "The paste is encrypted locally. The decryption key only appears in "
            "the fragment of the printed URL and is never sent to the server."
        ),
    )
    ap.add_argument(
        "server",
        nargs="?",
        help="Full server URL (e.g. https://paste.example/); overrides the PRIVATEBIN_* environment",
    )
    ap.add_argument("--password", "-p", help="Password for this paste (no password by default)")
    ap.add_argument("--host", "-H", help="PrivateBin server host")
    ap.add_argument(
        "--protocol",
        choices=[p.value for p in Protocol],
        help="Protocol to connect with (https by default)",
    )
    ap.add_argument("--port", "-P", type=int, help="Server port (protocol default by default)")
    ap.add_argument("--path", help="Path the server is served from (/ by default)")
    ap.add_argument(
        "--expire",
        "-e",
        choices=[e.value for e in Expiration],
        default=Expiration.NEVER.value,
        help="Expiration of this paste (never by default)",
    )
    ap.add_argument(
        "--format",
        "-f",
        choices=[f.value for f in Formatter],
        default=Formatter.PLAINTEXT.value,
        help="Format of this paste (plaintext by default)",
    )
    ap.add_argument("--burn", "-b", action="store_true", help="Post this paste in burn-after-reading mode")
    ap.add_argument("--opendiscussion", "-o", action="store_true", help="Open this paste to discussion")
    ap.add_argument("--timeout", type=float, help="Seconds to wait for the server (30 by default)")
    ap.add_argument("--verbose", "-v", action="count", default=0, help="Verbosity (-v, -vv)")
    return ap


def configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s", stream=sys.stderr)


def load_config(args: argparse.Namespace) -> ServerConfig:
    """Server configuration from the positional URL or environment, then flags."""
    if args.server:
        base = ServerConfig.from_url(args.server)
    else:
        base = ServerConfig.from_env()

    return base.with_overrides(
        host=args.host,
        protocol=args.protocol,
        port=args.port,
        path=args.path,
        timeout=args.timeout,
    )


def main(
    argv: Optional[List[str]] = None,
    stdin: Optional[BinaryIO] = None,
    transport: Optional[Transport] = None,
) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    configure_logging(args.verbose)

    try:
        config = load_config(args)
        options = PasteOptions.from_values(
            expiration=args.expire,
            formatter=args.format,
            burn_after_reading=args.burn,
            open_discussion=args.opendiscussion,
        )
    except ValidationError as e:
        print(f"{ap.prog}: error: {e}", file=sys.stderr)
        return EXIT_CODES[ValidationError]

    if args.password and is_blank_password(args.password):
        logger.warning("Password is blank; the paste will not be password protected")

    stream = stdin if stdin is not None else sys.stdin.buffer
    data = stream.read()
    logger.info("Sending content of stdin...")

    try:
        urls = PasteClient(config, transport=transport).paste(data, options, args.password)
    except PasteError as e:
        print(f"Could not create paste: {e}", file=sys.stderr)
        return exit_code_for(e)

    if urls is None:
        return EXIT_OK

    print(f"Your private paste URL is: {urls.view_url}")
    if urls.delete_url is not None:
        print(f"Your delete URL is: {urls.delete_url}")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
