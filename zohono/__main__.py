import sys

from zohono.cli import main

sys.exit(main())
