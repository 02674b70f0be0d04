import sys

from swiftcheck.cli import main

sys.exit(main())
