#  MIT License
#
#  Copyright (c) 2025 by Dan Luca. All rights reserved.
#
