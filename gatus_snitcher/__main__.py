import sys

from gatus_snitcher.main import main

sys.exit(main())
