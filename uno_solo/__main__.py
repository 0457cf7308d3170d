import sys

from uno_solo.main import main

sys.exit(main())
