# SPDX-License-Identifier: MIT

from keepsake.initialize import initialize
from keepsake.terminal.app import run


def main() -> None:
    initialize()
    run()


if __name__ == "__main__":
    main()
