"""
Exceptions raised while reading or writing S text.
"""

# ParseError kinds
UNBALANCED_PARENS = 'UnbalancedParens'
UNMATCHED_CLOSE = 'UnmatchedClose'
UNEXPECTED_TOKEN = 'UnexpectedToken'


class Position:
    """Where a token starts: 1-based line and column, 0-based byte offset"""

    def __init__(self, line=1, column=1, offset=0):
        self.line = line
        self.column = column
        self.offset = offset

    def __eq__(self, other):
        if not isinstance(other, Position):
            return NotImplemented
        return (self.line, self.column, self.offset) == (other.line, other.column, other.offset)

    def __hash__(self):
        return hash((self.line, self.column, self.offset))

    def __repr__(self):
        return f'Position(line={self.line}, column={self.column}, offset={self.offset})'

    def __str__(self):
        return f'line {self.line}, column {self.column} (byte {self.offset})'


class SexprError(Exception):

    def __init__(self, position, reason):
        super().__init__(position, reason)
        self.position = position
        self.reason = reason

    def __str__(self):
        if self.position is None:
            return self.reason
        return f'{self.position}: {self.reason}'

    def excerpt(self, text):
        '''
        Render the source line the error points at, with a caret under
        the offending column, for printing by command-line tools.
        '''
        if self.position is None:
            return str(self)
        lines = text.split('\n')
        idx = min(self.position.line, len(lines)) - 1
        line = lines[idx].rstrip('\r')
        gutter = f'{self.position.line} | '
        caret = ' ' * (len(gutter) + self.position.column - 1) + '^'
        return f'{self}\n{gutter}{line}\n{caret}'


class LexError(SexprError):
    pass


class ParseError(SexprError):

    def __init__(self, position, kind, expected=None, found=None, opened=None):
        reason = kind
        if expected is not None:
            reason = f'{kind}: expected {expected}, found {found}'
        elif found is not None:
            reason = f'{kind}: unexpected {found}'
        super().__init__(position, reason)
        self.kind = kind
        self.expected = expected
        self.found = found
        # where the unclosed list began, for UnbalancedParens
        self.opened = opened


class WriteError(SexprError):

    def __init__(self, reason):
        super().__init__(None, reason)


class ConfigError(SexprError):

    def __init__(self, reason):
        super().__init__(None, reason)
