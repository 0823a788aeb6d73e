# SPDX-License-Identifier: MIT

from daysheet.cleanup import register_cleanup
from daysheet.initialize import initialize
from daysheet.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
