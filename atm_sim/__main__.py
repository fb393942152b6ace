import sys

from atm_sim.cli import main

sys.exit(main())
