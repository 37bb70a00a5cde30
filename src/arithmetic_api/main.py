"""
Main entrypoint used by the console script.

This script:
- Parses the listening address from the command line
- Validates it
- Starts the arithmetic HTTP server
"""

import argparse
from typing import List, Optional

from pydantic import BaseModel, Field, IPvAnyAddress, ValidationError

from arithmetic_api.server.server import ArithmeticServer


class CliArgs(BaseModel):
    """
    Pydantic model used to validate CLI arguments.

    Attributes
    ----------
    host : IPvAnyAddress
        Address the server binds to.
    port : int
        TCP port the server listens on.
    """

    host: IPvAnyAddress = Field(default="127.0.0.1")
    port: int = Field(default=4000, ge=1, le=65535)


def parse_args(argv: Optional[List[str]] = None) -> CliArgs:
    """
    Parse and validate command-line arguments.

    :param argv: Arguments to parse, defaults to sys.argv[1:]
    :return: Validated CLI arguments
    :rtype: CliArgs
    """
    parser = argparse.ArgumentParser(
        description="Arithmetic HTTP server (sum, subtract, multiply, divide)"
    )

    parser.add_argument("--host", default="127.0.0.1", help="Address to bind to")
    parser.add_argument("--port", default=4000, help="Port to listen on")

    args = parser.parse_args(argv)

    try:
        return CliArgs(host=args.host, port=args.port)
    except ValidationError as exc:
        parser.error(str(exc))


def main(argv: Optional[List[str]] = None) -> None:
    """
    Main function executed by the console script.
    """
    cli_args = parse_args(argv)
    server = ArithmeticServer(host=cli_args.host, port=cli_args.port)
    server.start()


if __name__ == "__main__":
    main()
