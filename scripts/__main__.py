"""Allow `python -m scripts` by running the data set check."""

import sys

from scripts.check_cms_data import main

sys.exit(main())
