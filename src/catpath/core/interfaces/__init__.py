from .fs import DirectoryProbeProtocol, HomeResolverProtocol
from .logging import LoggerFactoryProtocol, LoggerLikeProtocol

__all__ = [
    'DirectoryProbeProtocol',
    'HomeResolverProtocol',
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
]
