import sys

from hobson_trains.cli import main

sys.exit(main())
