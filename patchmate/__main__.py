import sys

from patchmate.cli import main

sys.exit(main())
