from .base import ExecResult, Runner
from .dbapi import CursorResult, DBAPIRunner, as_runner

__all__ = ['ExecResult', 'Runner', 'CursorResult', 'DBAPIRunner', 'as_runner']
