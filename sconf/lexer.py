"""
Tokenizer for S text.

Turns text into a lazy stream of Tokens: open and close parens, atoms
(bare runs of characters or quoted strings) and ';' comments.  Whether a
bare atom is a symbol or a number is left to the parser.
"""
from io import StringIO

from .errors import LexError, Position

# tokens
[T_OPEN, T_CLOSE, T_ATOM, T_COMMENT] = range(4)
# states
[S_START, S_BARE, S_STRING, S_COMMENT] = range(4)

TOKEN_NAMES = {T_OPEN: "'('", T_CLOSE: "')'", T_ATOM: 'atom', T_COMMENT: 'comment'}

WHITESPACE = ' \t\r\n\f'
DELIMITERS = WHITESPACE + '();"'
QUOTES = '"\''
ESCAPES = {'"': '"', "'": "'", '\\': '\\', 'n': '\n', 't': '\t', 'r': '\r'}


class Token:

    def __init__(self, kind, value, position, raw=None, quote=None, inline=False):
        self.kind = kind
        self.value = value
        self.position = position
        # source text of the token, quotes and escapes included
        self.raw = value if raw is None else raw
        # quote character for string atoms, None for bare atoms
        self.quote = quote
        # comments only: shares its line with the token before it
        self.inline = inline

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return (self.kind, self.value, self.quote) == (other.kind, other.value, other.quote)

    def __repr__(self):
        return f'Token({TOKEN_NAMES[self.kind]}, {self.value!r}, {self.position!r})'

    def describe(self):
        if self.kind == T_ATOM:
            return f'atom {self.raw}'
        return TOKEN_NAMES[self.kind]


class Lexer:
    """An S text tokenizer; iterate over it to get Tokens"""

    def __init__(self, input):
        if isinstance(input, str):
            input = StringIO(input)
        self.input = input
        self.char = None
        self.line = 1
        self.column = 1
        self.offset = 0
        self._prev = (1, 1, 0)
        # line on which the last non-comment token ended
        self.last_line = 0

    def position(self):
        return Position(self.line, self.column, self.offset)

    def getc(self):
        if self.char is None:
            c = self.input.read(1)
        else:
            c = self.char
            self.char = None
        if not c:
            return c
        self._prev = (self.line, self.column, self.offset)
        if c == '\n':
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        self.offset += len(c.encode('utf-8', 'surrogatepass'))
        return c

    def ungetc(self, c):
        if c:
            self.char = c
            self.line, self.column, self.offset = self._prev

    def _emit(self, token):
        self.last_line = self.line
        return token

    def get_token(self):
        """Return the next Token, or None at end of input"""
        token = []
        raw = []
        state = S_START
        start = None
        quote = None
        while 1:
            c = self.getc()
            if state == S_START:
                if not c:
                    return None
                elif c in WHITESPACE:
                    continue
                start = Position(*self._prev)
                if c == ';':
                    state = S_COMMENT
                elif c == '(':
                    return self._emit(Token(T_OPEN, '(', start))
                elif c == ')':
                    return self._emit(Token(T_CLOSE, ')', start))
                elif c in QUOTES:
                    state = S_STRING
                    quote = c
                    raw.append(c)
                else:
                    state = S_BARE
                    token.append(c)
            elif state == S_BARE:
                if not c or c in DELIMITERS:
                    self.ungetc(c)
                    return self._emit(Token(T_ATOM, ''.join(token), start))
                token.append(c)
            elif state == S_STRING:
                if not c:
                    raise LexError(start, f'unterminated string, missing closing {quote}')
                raw.append(c)
                if c == '\\':
                    escape_at = Position(*self._prev)
                    c = self.getc()
                    if not c:
                        raise LexError(start, f'unterminated string, missing closing {quote}')
                    raw.append(c)
                    if c not in ESCAPES:
                        raise LexError(escape_at, f'invalid escape \\{c} in string')
                    token.append(ESCAPES[c])
                elif c == quote:
                    return self._emit(Token(T_ATOM, ''.join(token), start,
                                            raw=''.join(raw), quote=quote))
                else:
                    token.append(c)
            elif state == S_COMMENT:
                if not c or c == '\n':
                    self.ungetc(c)
                    text = ''.join(token)
                    return Token(T_COMMENT, text.strip(), start, raw=';' + text.rstrip('\r'),
                                 inline=self.last_line == start.line)
                token.append(c)

    def __iter__(self):
        while 1:
            token = self.get_token()
            if token is None:
                return
            yield token


def tokenize(text):
    """Lazily tokenize text; a LexError ends the stream"""
    return iter(Lexer(text))
