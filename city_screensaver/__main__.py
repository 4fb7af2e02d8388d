"""Allow running as: python -m city_screensaver"""

import sys

from .screensaver import main

sys.exit(main())
