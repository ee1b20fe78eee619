import sys

from complex_visualizer.cli import main

sys.exit(main())
