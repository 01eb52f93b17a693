"""
arith CLI Entrypoint.

Runs a grammar rule over a source string and prints the Result. With no
arguments it reproduces the illustrative invocation: parsing ``x=3`` as an
assignment.

Example usage:
    arith
    arith "1+2*3" -r expr
    arith "a=b+1" -r assignment --json
    arith --repl --verbose

Functions:
    run_arith(source: str = "x=3", rule: str = "assignment", as_json: bool = False,
              pretty: bool = False) -> bool:
        Parses `source` with the named rule and prints the outcome.

    main() -> None:
        Parses CLI arguments, configures logging and dispatches to run_arith or the REPL.
"""

import argparse
import json
import logging
import sys

from arith.arith_combinator import Failure
from arith.arith_constants import DEFAULT_RULE, DEFAULT_SOURCE, rule_names
from arith.arith_grammar import parse

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )


def run_arith(
    source: str = DEFAULT_SOURCE,
    rule: str = DEFAULT_RULE,
    as_json: bool = False,
    pretty: bool = False,
) -> bool:
    """
    Parse `source` with a grammar rule and print the outcome.

    Args:
        source (str): The text to parse. Defaults to "x=3".
        rule (str): Name of the grammar rule to run. Defaults to "assignment".
        as_json (bool): If True, prints a successful value as JSON instead of the Result repr.
        pretty (bool): If True, prints banners around the output.

    Returns:
        bool: True if the rule matched, False on a parse failure.

    Raises:
        ValueError: If `rule` names no grammar rule.

    Side Effects:
        - Prints the Result to stdout, or the failure message to stderr.
    """
    logger.debug("parsing %r with rule %r", source, rule)
    result = parse(source, rule)

    if isinstance(result, Failure):
        print(f"Parse error: {result.message}", file=sys.stderr)
        return False

    if as_json:
        value = result.value
        payload = {
            "value": value.to_dict() if hasattr(value, "to_dict") else value,
            "remainder": result.remainder,
        }
        output = json.dumps(payload, indent=2 if pretty else None)
    else:
        output = repr(result)

    if pretty:
        banner = "=" * 20
        print(f"{banner}\nParsed [{rule}]\n{banner}\n{output}\n{banner}")
    else:
        print(output)

    if result.remainder:
        logger.info("unparsed remainder: %r", result.remainder)
    return True


def main() -> None:
    """
    Entry point for the arith CLI.

    Supported flags:
        - `-r`, `--rule`: Grammar rule to run (default: assignment).
        - `-j`, `--json`: Print the parsed value as JSON.
        - `-p`, `--pretty`: Show banners (and indented JSON).
        - `-v`, `--verbose`: Enable debug logging.
        - `--repl`: Launch the interactive REPL.

    Exits with status 1 when the source does not parse.
    """
    parser = argparse.ArgumentParser(prog="arith")
    parser.add_argument(
        "source",
        nargs="?",
        default=DEFAULT_SOURCE,
        help=f"Text to parse (default: {DEFAULT_SOURCE!r})",
    )
    parser.add_argument(
        "-r",
        "--rule",
        choices=rule_names,
        default=None,
        help=f"Grammar rule to run (default: {DEFAULT_RULE}, or expr in the REPL)",
    )
    parser.add_argument(
        "-j", "--json", dest="as_json", action="store_true", help="Print value as JSON"
    )
    parser.add_argument(
        "-p", "--pretty", action="store_true", help="Show output with banners"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--repl", action="store_true", help="Launch interactive REPL instead"
    )

    args = parser.parse_args()
    configure_logging(args.verbose)

    if args.repl:
        from arith.arith_repl import start_repl

        start_repl(rule=args.rule or "expr", verbose=args.verbose)
        return

    ok = run_arith(
        source=args.source,
        rule=args.rule or DEFAULT_RULE,
        as_json=args.as_json,
        pretty=args.pretty,
    )
    if not ok:
        sys.exit(1)


if __name__ == "__main__":
    main()
