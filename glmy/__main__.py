import sys

from glmy.main import main

sys.exit(main())
