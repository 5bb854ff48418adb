# Copyright 2022 Francis Meyvis (pwsync@mikmak.fun)

"""package version"""

__version__ = "0.1.0"
