import sys

from mediacatalog.main import main

sys.exit(main())
