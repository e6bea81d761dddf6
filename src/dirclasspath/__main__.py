import sys

from dirclasspath.cli import main

sys.exit(main())
