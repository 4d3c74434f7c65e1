"""
The S value tree: Symbol, Number and String leaves, List nodes, and the
Document that holds the top-level forms of one input.

Comments are not tree nodes.  A List (or the Document) keeps them in its
`comments` dict, keyed by the index of the child they precede; the key
len(list) holds comments that come after the last child.
"""
import re

# deepest list nesting the parser accepts and the writer will write
MAX_DEPTH = 200

_HEX_PREFIX = re.compile(r'^[+-]?0[xX]')
_HEX_LETTERS = re.compile(r'[a-fA-F]')


class Comment:

    def __init__(self, text, position=None, inline=False):
        self.text = text
        self.position = position
        self.inline = inline

    def __eq__(self, other):
        if not isinstance(other, Comment):
            return NotImplemented
        return (self.text, self.inline) == (other.text, other.inline)

    def __repr__(self):
        return f'Comment({self.text!r}, inline={self.inline})'


class Leaf:
    """A single atom; `raw` is its text as it appeared in the source"""

    def __init__(self, raw):
        self.raw = raw

    def _key(self):
        return self.raw

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash((type(self).__name__, self._key()))

    def __repr__(self):
        return f'{type(self).__name__}({self._key()!r})'

    def __str__(self):
        return self._key()


class Symbol(Leaf):
    pass


class Number(Leaf):
    """
    A bare atom that looks numeric.  The text is kept as-is since a token
    like 1af4 can't be rebuilt from its integer value; as_int() parses it
    when asked.
    """

    def as_int(self, base=None):
        '''
        parse the number.  With no base: a 0x prefix or any of a-f means
        hex, otherwise decimal.  Raises ValueError if it doesn't parse.
        '''
        if base is None:
            if _HEX_PREFIX.match(self.raw) or _HEX_LETTERS.search(self.raw):
                base = 16
            else:
                base = 10
        return int(self.raw, base)

    def __int__(self):
        return self.as_int()


class String(Leaf):

    def __init__(self, text, quote='"', raw=None):
        # raw is the quoted source token, or None for strings built in code
        super().__init__(raw)
        self.text = text
        self.quote = quote

    def _key(self):
        return self.text


class List(list):
    """A parenthesized group; a list of Values plus their comments"""

    def __init__(self, children=(), comments=None):
        super().__init__(children)
        self.comments = comments if comments is not None else {}

    def __repr__(self):
        return f'List({list.__repr__(self)})'

    def all_comments(self):
        for index in sorted(self.comments):
            yield from self.comments[index]


class Document:
    """The result of parsing one input: its top-level forms and comments"""

    def __init__(self, forms=(), comments=None):
        if comments is None:
            comments = getattr(forms, 'comments', None)
        self.forms = List(forms, comments)

    @property
    def comments(self):
        return self.forms.comments

    @property
    def root(self):
        return self.forms[0] if self.forms else None

    def __iter__(self):
        return iter(self.forms)

    def __len__(self):
        return len(self.forms)

    def __getitem__(self, index):
        return self.forms[index]

    def __eq__(self, other):
        if not isinstance(other, Document):
            return NotImplemented
        return list(self.forms) == list(other.forms)

    def __repr__(self):
        return f'Document({list.__repr__(self.forms)})'


def is_value(obj):
    return isinstance(obj, (Leaf, List))
