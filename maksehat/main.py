"""Command-line entry point choosing between the text and graphical modes."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from maksehat.cli import Cli

USAGE = "Contoh Penggunaan: maksehat [cli/gui]"


def gui_mode() -> None:
    """Graphical mode placeholder screen."""
    print("In Progress!")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the mode named by the first argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print(USAGE)
        return 0

    mode = args[0]
    if mode == "cli":
        Cli().run()
    elif mode == "gui":
        gui_mode()
    else:
        print("Perintah tidak dikenali:", mode)
        print("Contoh Penggunaan: maksehat cli (untuk masuk ke mode CLI)")
    return 0


if __name__ == "__main__":
    sys.exit(main())