"""Entry point for running eventhub as a module.

This file allows eventhub to be run with: python -m eventhub
"""

import sys

from eventhub.app import main

if __name__ == "__main__":
    sys.exit(main())
