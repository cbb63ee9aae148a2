"""``python -m ogc_styles ASSET_DIR CONFIG``"""

import sys

from .cli import main

sys.exit(main())
