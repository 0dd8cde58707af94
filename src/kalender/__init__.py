# SPDX-License-Identifier: MIT

from kalender.cleanup import register_cleanup
from kalender.initialize import initialize
from kalender.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
