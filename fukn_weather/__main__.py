import sys

from fukn_weather.cli import main

sys.exit(main())
