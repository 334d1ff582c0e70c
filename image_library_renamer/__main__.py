"""Run the application with `python -m image_library_renamer`."""

import sys

from image_library_renamer.main import main

sys.exit(main())
