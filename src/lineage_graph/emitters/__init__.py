"""Emitters for lineage query results"""
from .console import ConsoleEmitter
from .json_emitter import JSONEmitter

__all__ = [
    'ConsoleEmitter',
    'JSONEmitter'
]
