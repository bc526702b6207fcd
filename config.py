"""
Configuration for segmented-time-input
"""

from pathlib import Path

# Project paths
PROJECT_ROOT = Path(__file__).parent

# Logging settings
LOG_FILE = PROJECT_ROOT / 'time-input.log'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Time input settings
TWELVE_HOUR_FORMAT = False  # False: 24 小時制 (HH:MM)，True: HH:MM AM|PM

# UI settings
APP_TITLE = 'Segmented Time Input'
FIELD_LABEL = 'Time'
FIELD_PLACEHOLDER = 'HH:MM'
WINDOW_WIDTH = 480
WINDOW_HEIGHT = 320
