# RadixCalc SDK - Bridge Entry Point
# Copyright (c) 2024 RadixCalc Contributors. All rights reserved.

"""Serve the JSON bridge on stdin/stdout: ``python -m radixcalc``."""

import logging
import os
import sys

from .bridge import serve


def main() -> int:
    logging.basicConfig(
        level=os.environ.get("RADIXCALC_LOG_LEVEL", "WARNING").upper(),
        stream=sys.stderr,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    serve(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
