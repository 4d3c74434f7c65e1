"""
Recursive-descent parser turning S text into a Document.

Bare atoms become Numbers when the `number` predicate accepts them and
Symbols otherwise; quoted atoms are always Strings.  Comments are attached
to the next value at the same depth, or to the end of the enclosing list.
"""
import re

from . import log
from .errors import ParseError, UNBALANCED_PARENS, UNMATCHED_CLOSE, UNEXPECTED_TOKEN
from .lexer import Lexer, T_OPEN, T_CLOSE, T_COMMENT
from .values import MAX_DEPTH, Comment, Document, List, Number, String, Symbol

_LOOKS_NUMERIC = re.compile(r'[+-]?(0[xX][0-9a-fA-F]+|[0-9][0-9a-fA-F]*)')
_DECIMAL = re.compile(r'[+-]?[0-9]+')
_HEX_DIGITS = re.compile(r'[0-9a-fA-F]+')


def looks_numeric(raw):
    '''
    optional sign, then 0x and hex digits, or a decimal digit followed by
    hex digits: 8086, 1af4, -12, 0x1F.  Words made of hex letters only,
    like face or a, stay symbols.
    '''
    return _LOOKS_NUMERIC.fullmatch(raw) is not None


def decimal_only(raw):
    return _DECIMAL.fullmatch(raw) is not None


def hex_digits(raw):
    return _HEX_DIGITS.fullmatch(raw) is not None


NUMBER_PATTERNS = {'default': looks_numeric,
                   'decimal': decimal_only,
                   'hex': hex_digits,
                  }


class Parser:
    """An S text parser"""

    def __init__(self, text, number=looks_numeric):
        self.lexer = Lexer(text)
        self.tokens = iter(self.lexer)
        self.number = number
        self.depth = 0

    def next_token(self):
        return next(self.tokens, None)

    def next_value_token(self):
        token = self.next_token()
        while token is not None and token.kind == T_COMMENT:
            token = self.next_token()
        return token

    def atom(self, token):
        if token.quote is not None:
            return String(token.value, token.quote, token.raw)
        if self.number(token.value):
            return Number(token.value)
        return Symbol(token.value)

    def value(self, token):
        if token.kind == T_OPEN:
            if self.depth >= MAX_DEPTH:
                raise ParseError(token.position, UNEXPECTED_TOKEN,
                                 expected=f'at most {MAX_DEPTH} nested lists', found="'('")
            self.depth += 1
            items = self.items(token)
            self.depth -= 1
            return items
        elif token.kind == T_CLOSE:
            raise ParseError(token.position, UNMATCHED_CLOSE, found="')'")
        return self.atom(token)

    def items(self, opened=None):
        '''
        Collect values up to the ')' matching `opened`, or to the end of
        input when opened is None, along with the comments between them.
        '''
        items = List()
        pending = []
        while 1:
            token = self.next_token()
            if token is None:
                if opened is not None:
                    raise ParseError(self.lexer.position(), UNBALANCED_PARENS,
                                     expected="')'", found='end of input',
                                     opened=opened.position)
                break
            if token.kind == T_COMMENT:
                pending.append(Comment(token.value, token.position, token.inline))
                continue
            if token.kind == T_CLOSE and opened is not None:
                break
            if pending:
                items.comments[len(items)] = pending
                pending = []
            items.append(self.value(token))
        if pending:
            items.comments[len(items)] = pending
        return items

    def parse(self):
        """Parse the whole input into a Document"""
        forms = self.items()
        log.debug(lambda: f'parsed {len(forms)} top-level form(s)')
        return Document(forms, forms.comments)

    def parse_one(self):
        """Parse an input holding exactly one value; top-level comments are dropped"""
        token = self.next_value_token()
        if token is None:
            raise ParseError(self.lexer.position(), UNEXPECTED_TOKEN,
                             expected='a value', found='end of input')
        result = self.value(token)
        extra = self.next_value_token()
        if extra is not None and extra.kind == T_CLOSE:
            raise ParseError(extra.position, UNMATCHED_CLOSE, found="')'")
        if extra is not None:
            raise ParseError(extra.position, UNEXPECTED_TOKEN,
                             expected='end of input', found=extra.describe())
        return result


def parse(text, number=looks_numeric):
    """Parse S text into a Document; raises LexError or ParseError"""
    return Parser(text, number).parse()


def parse_one(text, number=looks_numeric):
    """Parse S text holding a single value and return that value"""
    return Parser(text, number).parse_one()
