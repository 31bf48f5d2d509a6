"""Core data types."""

from .record import NameRecord, MatchResult, ScoreEvent

__all__ = ['NameRecord', 'MatchResult', 'ScoreEvent']
