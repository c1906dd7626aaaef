"""Entry point for money-input."""

import sys

from money_input.app import MoneyInputApp
from money_input.config import parse_args, resolve_config
from money_input.errors import InvalidConfiguration


def main() -> None:
    """Run the money-input application."""
    args = parse_args()
    try:
        config = resolve_config(args)
    except InvalidConfiguration as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)
    app = MoneyInputApp(config=config)
    app.run()


if __name__ == "__main__":
    main()
