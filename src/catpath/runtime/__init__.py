from .sdk import concat_paths
from .wiring import build_assembler, build_path_args, resolve_separator

__all__ = ['build_assembler', 'build_path_args', 'concat_paths', 'resolve_separator']
