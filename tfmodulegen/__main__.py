import sys

from tfmodulegen.pipeline import main

sys.exit(main())
