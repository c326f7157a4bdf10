# Copyright 2025 Ilja Heitlager
# SPDX-License-Identifier: Apache-2.0

"""
Command-line entry point: serve the demo site with Flask's development server.
"""

import sys

from dotenv import load_dotenv


def main():
    """Load .env and CLI options, then run the demo site."""
    # Config reads os.environ at import time, so .env has to be loaded first
    load_dotenv()

    from .config import Config
    from .factory import create_app

    Config.from_cli_args()

    problems = Config.validate()
    if problems:
        print("Cannot start, invalid configuration:")
        for problem in problems:
            print(f"  - {problem}")
        sys.exit(1)

    create_app().run(host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)


if __name__ == "__main__":
    main()
