import sys

from pollencast.cli import main

sys.exit(main())
