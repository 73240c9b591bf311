#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
cgstats v0.1.0

Version information.

Author: cgstats Development Team
License: MIT - See LICENSE
"""

__version__ = "0.1.0"

# cgstats v0.1.0
# Any usage is subject to this software's license.
