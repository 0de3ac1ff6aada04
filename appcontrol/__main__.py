import sys

from appcontrol.app import main

sys.exit(main())
