"""
Read one JSON program from stdin, evaluate it and print the encoded result.

Usage:
    echo '{"Point": [0, 0]}' | python main.py
"""

import sys

from planar_processor import ProgramRunner


def main() -> int:
    runner = ProgramRunner()
    result = runner.run(sys.stdin.read())
    if not result.ok:
        print(runner.render(result), file=sys.stderr)
        return 1
    print(runner.render(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
