import sys
from treecalc.cli import main

sys.exit(main())
