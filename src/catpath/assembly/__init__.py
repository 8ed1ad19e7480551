from .assembler import PathAssembler, assemble

__all__ = ['PathAssembler', 'assemble']
