import io
import json
import traceback

from arith.arith_combinator import Failure
from arith.arith_grammar import RULES, parse


def print_traceback() -> None:
    buf = io.StringIO()
    traceback.print_exc(file=buf)
    print("[error] >>>")
    print(buf.getvalue())


def handle_rule_command(src: str, current: str) -> str | None:
    """Handles ``rule`` / ``rule NAME``. Returns the active rule, or None if `src` is not a rule command."""
    parts = src.split()
    if not parts or parts[0].lower() != "rule":
        return None
    if len(parts) == 1:
        print(f"[rule] >>> {current} (available: {', '.join(RULES)})")
        return current
    name = parts[1]
    if name not in RULES:
        print(f"[error] >>> Unknown rule: {name}")
        return current
    print(f"[rule] >>> Active rule: {name}")
    return name


def start_repl(rule: str = "expr", verbose: bool = False) -> None:
    print(f"Arith REPL [rule={rule}]. Type 'exit' or 'quit' to leave.")

    while True:
        try:
            src = input(">>> ").strip()
            if src in ("exit", "quit"):
                print("Exiting Arith REPL.")
                return
            if not src or src.startswith("#"):
                continue
            if src.lower() == "verbose-mode":
                verbose = not verbose
                print(f"[mode] >>> Verbose mode {'ON' if verbose else 'OFF'}")
                continue
            switched = handle_rule_command(src, rule)
            if switched is not None:
                rule = switched
                continue

            try:
                result = parse(src, rule)
            except Exception:
                print_traceback()
                continue

            if isinstance(result, Failure):
                print(f"[error] >>> {result.message}")
                continue

            print(result.value)
            if verbose:
                print(f"[tree] >>> {json.dumps(result.value.to_dict())}")
            if result.remainder:
                print(f"[warn] >>> Unparsed remainder: {result.remainder!r}")

        except (KeyboardInterrupt, EOFError):
            print("\nExiting Arith REPL.")
            break


def main() -> None:
    start_repl()


if __name__ == "__main__":
    main()
