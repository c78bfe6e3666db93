from __future__ import annotations

OK = 0
ERR_DRIFT = 1
ERR_USAGE = 2
ERR_CONFIG = 3
ERR_RESOLUTION = 4
ERR_FORMAT = 5
ERR_ARTIFACT = 6
ERR_INTERNAL = 99
