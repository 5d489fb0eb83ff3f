"""Entry point for running i18nx as a module.

Usage:
    python -m i18nx -s translations.yaml -l fr translate "Hello"
"""

import sys

from i18nx.main import main

sys.exit(main())
