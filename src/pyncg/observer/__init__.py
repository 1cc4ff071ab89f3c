"""
Observer module for monitoring minimization progress.
"""

from .observer import CompositeObserver, HistoryObserver, Observer, PrintObserver

__all__ = [
    "Observer",
    "CompositeObserver",
    "HistoryObserver",
    "PrintObserver",
]
