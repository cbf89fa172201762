import sys

from swaglabs.cli import main

sys.exit(main())
