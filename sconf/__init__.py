"""
sconf: read and write the S configuration format.

S text is nested parenthesized lists of symbols, quoted strings and
numeric-looking atoms, with ';' comments to end of line:

    (pci-drivers
    	(1af4 ; Red Hat
    		(1000 "drivers/pci/virtio/net")))

parse() turns text into a Document of values, write() turns a Document
(or any value) back into text, and sconf.query has helpers for digging
through the tree.
"""

from .errors import (Position, SexprError, LexError, ParseError, WriteError, ConfigError,
                     UNBALANCED_PARENS, UNMATCHED_CLOSE, UNEXPECTED_TOKEN)
from .lexer import Lexer, Token, tokenize
from .log import set_debug
from .parser import Parser, parse, parse_one, looks_numeric, decimal_only, hex_digits
from .query import (children, nth, as_symbol, as_string, as_number, head,
                    find, find_all, find_head, lookup)
from .values import Comment, Document, Leaf, List, Number, String, Symbol
from .writer import Writer, WriterOptions, quote_string, write
