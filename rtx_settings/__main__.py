import sys

from rtx_settings.cli import main

sys.exit(main())
