"""
Serialize S values back to text.

Layout: a list with no nested lists and no comments is written on one
line when it fits in inline_threshold characters; otherwise its first
child follows the '(' and every other child gets its own line, indented
one step deeper than the list.  Symbols and numbers are written exactly
as they were read.

Values that can't be written back as the same tree (an empty symbol, a
symbol with whitespace or parens in it, something that isn't a Value at
all, lists nested deeper than MAX_DEPTH) raise WriteError rather than
producing text that reads differently.
"""
from . import log
from .errors import WriteError
from .lexer import DELIMITERS, QUOTES
from .values import MAX_DEPTH, Document, Leaf, List, String

_STRING_ESCAPES = {'\\': '\\\\', '\n': '\\n', '\t': '\\t', '\r': '\\r'}


class WriterOptions:

    def __init__(self, indent='\t', inline_threshold=72, preserve_comments=True,
                 canonical_strings=False):
        self.indent = indent
        # 0 or less: every non-empty list spans lines
        self.inline_threshold = inline_threshold
        self.preserve_comments = preserve_comments
        # re-quote strings instead of reusing their source text
        self.canonical_strings = canonical_strings

    def replace(self, **overrides):
        settings = dict(vars(self))
        settings.update(overrides)
        return WriterOptions(**settings)

    def __eq__(self, other):
        if not isinstance(other, WriterOptions):
            return NotImplemented
        return vars(self) == vars(other)

    def __repr__(self):
        settings = ', '.join(f'{k}={v!r}' for k, v in vars(self).items())
        return f'WriterOptions({settings})'


def quote_string(text, quote='"'):
    out = [quote]
    for c in text:
        if c == quote:
            out.append('\\' + c)
        else:
            out.append(_STRING_ESCAPES.get(c, c))
    out.append(quote)
    return ''.join(out)


class Writer:
    """Writes Values and Documents with a fixed set of WriterOptions"""

    def __init__(self, options=None):
        self.options = options or WriterOptions()

    def leaf(self, leaf):
        if isinstance(leaf, String):
            if leaf.quote not in QUOTES:
                raise WriteError(f'{leaf!r} has an unknown quote character {leaf.quote!r}')
            if leaf.raw is not None and not self.options.canonical_strings:
                return leaf.raw
            return quote_string(leaf.text, leaf.quote)
        raw = leaf.raw
        if not raw or raw[0] in QUOTES or any(c in DELIMITERS for c in raw):
            raise WriteError(f'{leaf!r} cannot be written as a bare atom')
        return raw

    def comments(self, seq, index):
        if not self.options.preserve_comments:
            return ()
        return seq.comments.get(index, ())

    def inline(self, lst):
        '''the one-line form of lst, or None if it has to span lines'''
        if self.options.inline_threshold <= 0:
            return None
        if self.options.preserve_comments and any(lst.comments.values()):
            return None
        if any(isinstance(child, List) for child in lst):
            return None
        text = '(' + ' '.join(self.value(child, 0) for child in lst) + ')'
        if len(text) > self.options.inline_threshold:
            return None
        return text

    def children(self, seq, depth, out, line_open):
        '''
        Append the children of seq (and their comments) to out, one per
        line, each nested list written at `depth`.  line_open says whether
        the current line already has text on it.  Returns whether the
        last line written ends in a comment.
        '''
        pad = self.options.indent * depth
        commented = False
        for i in range(len(seq) + 1):
            for comment in self.comments(seq, i):
                text = f'; {comment.text}' if comment.text else ';'
                if comment.inline and line_open and not commented:
                    out.append(' ' + text)
                else:
                    if line_open:
                        out.append('\n')
                    out.append(pad + text)
                line_open = True
                commented = True
            if i == len(seq):
                break
            if line_open and (commented or i > 0):
                out.append('\n' + pad)
            out.append(self.value(seq[i], depth))
            line_open = True
            commented = False
        return commented

    def group(self, lst, depth):
        if depth >= MAX_DEPTH:
            raise WriteError(f'lists nested more than {MAX_DEPTH} deep cannot be written')
        if not lst and not self.comments(lst, 0):
            return '()'
        text = self.inline(lst)
        if text is not None:
            return text
        out = ['(']
        if self.children(lst, depth + 1, out, True):
            out.append('\n' + self.options.indent * depth)
        out.append(')')
        return ''.join(out)

    def value(self, value, depth=0):
        if isinstance(value, List):
            return self.group(value, depth)
        elif isinstance(value, Leaf):
            return self.leaf(value)
        raise WriteError(f'{value!r} is not an S value')

    def document(self, doc):
        out = []
        self.children(doc.forms, 0, out, False)
        if out:
            out.append('\n')
        return ''.join(out)


def write(doc, options=None, **overrides):
    '''
    Write a Document, or a single Value, as S text ending in a newline.
    Keyword arguments override fields of options, e.g.
    write(doc, preserve_comments=False).
    '''
    options = options or WriterOptions()
    if overrides:
        options = options.replace(**overrides)
    log.debug(lambda: f'writing with {options!r}')
    if not isinstance(doc, Document):
        doc = Document([doc])
    return Writer(options).document(doc)
