"""Allow ``python -m askai.cli`` execution."""

import sys

from askai.cli.ask import main

sys.exit(main())
