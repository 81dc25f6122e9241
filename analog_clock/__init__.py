"""
Terminal Analog Clock
A live analog clock drawn with characters in the terminal.
"""

import logging

__version__ = "1.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
