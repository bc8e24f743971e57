from .logging import LoggerLikeProtocol
from .readers import InputReaderProtocol
from .text import TextReformatterProtocol

__all__ = [
    'InputReaderProtocol',
    'LoggerLikeProtocol',
    'TextReformatterProtocol',
]
