# Services package

from .arg_tokenizer import ArgTokenizer, tokenize

__all__ = [
    "ArgTokenizer",
    "tokenize",
]
