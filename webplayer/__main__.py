import sys

from webplayer.cli import main

sys.exit(main())
