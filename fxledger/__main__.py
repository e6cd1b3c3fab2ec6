import sys

from fxledger.runner import main

sys.exit(main())
