from .parser import help_text, parse_argv
from .tokenizer import PathListTokenizer, tokenize

__all__ = ['PathListTokenizer', 'help_text', 'parse_argv', 'tokenize']
