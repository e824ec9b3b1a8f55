import sys

from aliasdoc.cli import main

sys.exit(main())
