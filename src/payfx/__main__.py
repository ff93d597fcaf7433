import sys

from payfx.cli import main

sys.exit(main())
