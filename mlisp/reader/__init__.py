from mlisp.reader.lexer import Token, lex, tokenize
from mlisp.reader.parser import TokenStream, ParseSuccess, ParseFailure, parse, parse_at
