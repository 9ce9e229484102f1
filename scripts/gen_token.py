"""Generate an hdnts stream access token from a source checkout.

Example:
    python scripts/gen_token.py -s 1578935505 -e 1578935593 -u YourStreamId -k demosecret123abc
"""

import sys
from pathlib import Path

# Ensure `import streamtoken` works without installing the package.
ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from streamtoken.cli import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())
