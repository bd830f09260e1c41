"""
Event recording for roster and round activity.
"""

from .event_emitter import EventEmitter

__all__ = ['EventEmitter']
