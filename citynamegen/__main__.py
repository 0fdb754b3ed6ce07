import sys

from citynamegen.cli import main

sys.exit(main())
