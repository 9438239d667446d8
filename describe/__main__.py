import sys

from describe.cli import main

sys.exit(main())
