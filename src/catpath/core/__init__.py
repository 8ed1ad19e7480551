from .errors import AssemblyError, CatPathError, ConfigurationError
from .models import PathArgs

__all__ = [
    'AssemblyError',
    'CatPathError',
    'ConfigurationError',
    'PathArgs',
]
