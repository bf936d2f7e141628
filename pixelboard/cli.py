"""Command that opens the window and runs the interactive demo."""

from __future__ import annotations

import argparse
import sys

from pixelboard.graphics import Graphics
from pixelboard.runner import Runner


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="pixelboard",
        description="Show the colour palette demo; arrow keys move the cursor, Escape quits.",
    )
    parser.parse_args(argv)
    try:
        with Graphics() as graphics:
            Runner(graphics).run()
    except Exception as exc:
        print(f"Exception: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())