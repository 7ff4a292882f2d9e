# -*- coding: utf-8 -*-
"""
Weight-cut protocol engine.

Pure calculations that turn an athlete's profile, weigh-in date and logs
into today's phase, target weight, safety level, nutrition targets and
protocol advice.
"""

__version__ = "0.1.0"
