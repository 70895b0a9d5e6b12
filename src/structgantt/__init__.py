# SPDX-License-Identifier: MIT

from structgantt.cleanup import register_cleanup
from structgantt.initialize import initialize
from structgantt.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
