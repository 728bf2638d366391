import sys

from compiletest.cli import main

sys.exit(main())
