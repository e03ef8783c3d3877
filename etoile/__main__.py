import sys

from etoile.repl import main

sys.exit(main())
