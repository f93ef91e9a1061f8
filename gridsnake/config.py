"""
Session configuration.

Values come from the environment (a local .env file is loaded first) and act
as defaults for the command line flags.
"""

import os

from dotenv import load_dotenv

from gridsnake.domain.constants import DEFAULT_TICK_HZ

load_dotenv()

SURFACE_WIDTH = int(os.getenv('SNAKE_SURFACE_WIDTH', '400'))
SURFACE_HEIGHT = int(os.getenv('SNAKE_SURFACE_HEIGHT', '400'))
SCALE = int(os.getenv('SNAKE_SCALE', '20'))
TICK_HZ = float(os.getenv('SNAKE_TICK_HZ', str(DEFAULT_TICK_HZ)))
LOG_LEVEL = os.getenv('SNAKE_LOG_LEVEL', 'INFO')
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
