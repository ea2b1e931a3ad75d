from longhand.reader.lexer import tokenize
from longhand.reader.shunting_yard import to_postfix
