"""
Provides debugging utilities.
"""

import os


class Debug:
    """
    For holding some debugging variables.
    """

    is_debug = os.environ.get("SEXPKIT_DEBUG", "").lower() in ("1",
                                                             "true",
                                                             "yes")
