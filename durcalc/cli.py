import argparse

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000
LOG_LEVELS = ["debug", "info", "warning", "error"]
EXPRESSION_COMMANDS = ("eval", "seconds")


def add_expression_argument(parser: argparse.ArgumentParser) -> None:
    # REMAINDER keeps bare "-" operators from being read as options.
    parser.add_argument(
        "tokens",
        nargs=argparse.REMAINDER,
        metavar="TOKEN",
        help="Duration expression, e.g. 1h 30m + 45m - 10s",
    )


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="durcalc",
        description="Add and subtract durations written as weeks/days/hours/minutes/seconds",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    evaluate = subparsers.add_parser(
        "eval", help="Evaluate an expression and print the canonical duration"
    )
    add_expression_argument(evaluate)

    seconds = subparsers.add_parser(
        "seconds", help="Evaluate an expression and print the total in seconds"
    )
    add_expression_argument(seconds)

    serve = subparsers.add_parser("serve", help="Run the durcalc HTTP API")
    serve.add_argument("--host", default=DEFAULT_HOST, help="Host interface to bind")
    serve.add_argument(
        "--port", type=int, default=DEFAULT_PORT, help="Port to bind the HTTP server"
    )
    serve.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="info",
        help="Minimum level for request logging",
    )

    return parser


def parse_args(argv):
    argv = list(argv)
    parser = create_parser()
    params, extras = parser.parse_known_args(argv)
    if extras:
        if params.command not in EXPRESSION_COMMANDS:
            parser.error(f"unrecognized arguments: {' '.join(extras)}")
        # argparse splits "-1d + 2d" into extras and tokens; keep the
        # expression whole so it reports the stray operator itself.
        params.tokens = argv[argv.index(params.command) + 1 :]
    return params
