import sys

from ethgenesis.cli import main

sys.exit(main())
