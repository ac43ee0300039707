"""Tokenize an assignment and handle errors as result values."""

from calclex import Emitted, Failed, Finished, Lexer, tokenize

for token in tokenize("area = (w + 2.5) ** 2"):
    print(f"{token.line}:{token.column}  {token.kind.name:<12} {token.text}")

lexer = Lexer("total = price @ 3")
while True:
    match lexer.advance():
        case Emitted(token):
            print(token)
        case Failed(error):
            print(f"stopped: {error}")
        case Finished():
            break
