import sys

from cmdmailer.cli import main

sys.exit(main())
