"""docsnip executable module.

Delegates to cli.main(), which owns error handling and the exit code.
"""

from __future__ import annotations

import sys

from .cli import main


if __name__ == "__main__":
    sys.exit(main())
