# SPDX-License-Identifier: MIT

from hugo_calendar.terminal.app import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
