import re

from simulator.errors import UnexpectedEnd

# Only space and newline separate tokens; tabs stay part of a token.
TOKEN_PATTERN = re.compile(r"[^ \n]+")


class Tokens:
    """Lazy, restartable view of the tokens in a piece of text."""

    def __init__(self, text):
        self.text = text

    def __iter__(self):
        for match in TOKEN_PATTERN.finditer(self.text):
            yield match.group(0)


def tokenize(text):
    return Tokens(text)


class TokenStream:
    """Token iterator with one token of lookahead."""

    _EMPTY = object()

    def __init__(self, tokens):
        self._tokens = iter(tokens)
        self._peeked = self._EMPTY

    def peek(self):
        if self._peeked is self._EMPTY:
            self._peeked = next(self._tokens, None)
        return self._peeked

    def at_end(self):
        return self.peek() is None

    def next_token(self):
        token = self.peek()
        if token is None:
            raise UnexpectedEnd()
        self._peeked = self._EMPTY
        return token
