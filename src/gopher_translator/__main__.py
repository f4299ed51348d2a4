"""Allow ``python -m gopher_translator``."""

import sys

from gopher_translator.cli import main

sys.exit(main())
