#  MIT License
#
#  Copyright (c) 2025 by Dan Luca. All rights reserved.
#

class InvalidArgumentError(ValueError):
    """
    Raised when a required argument is missing or does not belong to the expected unit family.

    Every failure raised by the unit classifiers and by measurement construction or mutation is
    a contract violation by the caller; nothing is retried or recovered internally.
    """
    pass
