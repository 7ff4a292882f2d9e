# -*- coding: utf-8 -*-
"""
Tracking module

State snapshot, weight trends, celebrations and snapshot storage.
"""

from .models import DailyTracking, LogType, Profile, StateSnapshot, WeightLog
from .snapshot import ProfileProvider, SnapshotProvider
from .storage import JsonSnapshotStore

__all__ = [
    'DailyTracking',
    'LogType',
    'Profile',
    'StateSnapshot',
    'WeightLog',
    'ProfileProvider',
    'SnapshotProvider',
    'JsonSnapshotStore',
]
