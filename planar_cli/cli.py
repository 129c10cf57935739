"""
Planar CLI - Main entry point.

Provides a command-line interface for evaluating geometry programs.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from planar_lang import MalformedInputError
from planar_processor import ProgramRunner, RunnerConfig
from planar_processor.config import VALID_LOG_LEVELS

YAML_SUFFIXES = {".yaml", ".yml"}


def read_program(source: str) -> Tuple[str, str]:
    """
    Read program text from a file path or stdin ("-").

    Args:
        source: Path to a program file, or "-" for stdin

    Returns:
        (text, format) where format is "yaml" for .yaml/.yml files, else "json"

    Raises:
        MalformedInputError: If the file doesn't exist or can't be read
    """
    if source == "-":
        return sys.stdin.read(), "json"

    path = Path(source)
    if not path.is_file():
        raise MalformedInputError(f"Program file not found: {source}")

    fmt = "yaml" if path.suffix.lower() in YAML_SUFFIXES else "json"
    try:
        return path.read_text(encoding="utf-8"), fmt
    except (OSError, UnicodeDecodeError) as e:
        raise MalformedInputError(f"Cannot read {source}: {e}") from e


def load_config(args: argparse.Namespace) -> RunnerConfig:
    config = RunnerConfig.from_yaml(args.config) if args.config else RunnerConfig()
    if args.log_level:
        config = config.with_log_level(args.log_level)
    return config


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="planar-cli",
        description="Planar CLI - Evaluate geometry programs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Evaluate a program from a file (JSON, or YAML by extension)
  planar-cli eval program.json
  planar-cli eval program.yaml

  # Evaluate from stdin
  echo '{"Intersect": [{"Point": [0, 0]}, "Everywhere"]}' | planar-cli eval

  # Print the full result envelope
  planar-cli eval --envelope program.json

  # List available commands
  planar-cli commands
"""
    )

    # Global arguments
    parser.add_argument(
        "--config",
        default=None,
        help="Path to runner config YAML"
    )
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=sorted(VALID_LOG_LEVELS),
        help="Override the configured log level"
    )

    # Subcommands
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # eval command
    eval_cmd = subparsers.add_parser('eval', help='Evaluate a program')
    eval_cmd.add_argument('program', nargs='?', default='-', help='Program file, or - for stdin')
    eval_cmd.add_argument('--envelope', action='store_true', help='Print the full result envelope')

    # commands command
    subparsers.add_parser('commands', help='List available commands')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        config = load_config(args)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    runner = ProgramRunner(config=config)

    if args.command == 'commands':
        for signature, description in runner.evaluator.registry.get_help().items():
            print(f"{signature:<40} {description}")
        print(f"{'Let({name: expr}, in: expr)':<40} Bind names, then evaluate 'in'")
        return 0

    try:
        text, fmt = read_program(args.program)
    except MalformedInputError as e:
        print(f"Error [{e.kind.value}]: {e.message}", file=sys.stderr)
        return 1

    result = runner.run(text, fmt)

    if args.envelope:
        print(runner.render_envelope(result))
        return 0 if result.ok else 1

    if not result.ok:
        print(runner.render(result), file=sys.stderr)
        return 1

    print(runner.render(result))
    return 0


if __name__ == '__main__':
    sys.exit(main())
