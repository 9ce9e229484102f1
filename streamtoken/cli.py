"""Generate an ``hdnts`` access token for a protected stream target.

Example:
    gen-token -l 3600 -u YourStreamId -k demosecret123abc
"""

import argparse
import logging
import sys
from typing import Sequence

from streamtoken.core.config import get_settings
from streamtoken.core.exceptions import TokenError
from streamtoken.observability import configure_logging
from streamtoken.services.generator import generate_token
from streamtoken.services.timing import build_request

logger = logging.getLogger("streamtoken.cli")

DESCRIPTION = """\
gen-token: generate valid authentication tokens for protected stream targets.

Requests to a protected stream target must carry a parameter block generated
by this tool, otherwise the request is blocked.

Every token is tied to a specific stream id and has a limited lifetime.
Optionally the client's IP address or a start time, denoting from when on the
token is valid, can be factored in. Keep in mind that the stream target
configuration has to match these optional parameters in some cases.
"""

EPILOG = """\
examples:
  # Token valid for 1 hour (3600 seconds) protecting the stream id
  # YourStreamId with the secret demosecret123abc
  gen-token -l 3600 -u YourStreamId -k demosecret123abc
  hdnts=exp=1579792240~hmac=efe1cef703a1951c7e01e49257ae33487adcf80ec91db2d264130fbe0daeb7ed

  # Token valid from 1578935505 to 1578935593 (Unix epoch seconds)
  gen-token -s 1578935505 -e 1578935593 -u YourStreamId -k demosecret123abc
  hdnts=st=1578935505~exp=1578935593~hmac=aaf01da130e5554eeb74159e9794c58748bc9f6b5706593775011964612b6d99
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gen-token",
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-l", "--lifetime", metavar="SECONDS",
        help="Token expires after SECONDS. --lifetime or --end_time is mandatory.",
    )
    parser.add_argument(
        "-e", "--end_time", metavar="END_TIME",
        help="Token expiration in Unix epoch seconds. --end_time overrides --lifetime.",
    )
    parser.add_argument(
        "-u", "--stream_id", metavar="STREAMID", required=True,
        help="STREAMID to validate the token against.",
    )
    parser.add_argument(
        "-k", "--key", metavar="SECRET", dest="secret",
        help="Secret required to generate the token (or set HDNTS_SECRET). Do not share this secret.",
    )
    parser.add_argument(
        "-s", "--start_time", metavar="START_TIME",
        help="(Optional) Start time in Unix epoch seconds. Use 'now' for the current time.",
    )
    parser.add_argument(
        "-i", "--ip", metavar="IP_ADDRESS",
        help="(Optional) The token is only valid for this IP address.",
    )
    parser.add_argument(
        "-v", "--vod", metavar="VOD_STREAM_ID", dest="vod_stream_id",
        help="(Optional) The token is only valid for this VOD stream.",
    )
    parser.add_argument("--verbose", action="store_true", help="Log diagnostics to stderr.")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging("DEBUG" if args.verbose else None)

    secret = args.secret
    if secret is None:
        # Dynaconf parses env values as TOML, so a numeric secret arrives as int.
        configured = get_settings().get("secret")
        secret = str(configured) if configured is not None else None

    try:
        request = build_request(
            stream_id=args.stream_id,
            secret=secret,
            start_time=args.start_time,
            end_time=args.end_time,
            lifetime=args.lifetime,
            ip=args.ip,
            vod_stream_id=args.vod_stream_id,
        )
        token = generate_token(request)
    except TokenError as exc:
        logger.debug("Token generation failed: %s", exc.__class__.__name__)
        print(f"Error: {exc.detail}", file=sys.stderr)
        return exc.exit_code

    print(token.render())
    return 0


if __name__ == "__main__":
    sys.exit(main())
