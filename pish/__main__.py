import sys

from pish.shell import main

sys.exit(main())
