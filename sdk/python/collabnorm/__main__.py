import sys

from collabnorm.cli import main

sys.exit(main())
