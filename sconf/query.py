"""
Read-only helpers for picking values out of a parsed tree.

None of these raise when something isn't there; they return None (or an
empty sequence) instead.

    >>> doc = parse('(pci-drivers (1af4 (1000 "drivers/pci/virtio/net")))')
    >>> as_string(nth(lookup(doc.root, '1af4', '1000'), 1))
    'drivers/pci/virtio/net'
"""
from .values import Leaf, List, Number, String, Symbol


def children(value):
    if isinstance(value, List):
        return tuple(value)
    return ()


def nth(value, n):
    '''the nth child of a list, or None'''
    if not isinstance(value, List) or not -len(value) <= n < len(value):
        return None
    return value[n]


def as_symbol(value):
    if isinstance(value, Symbol):
        return value.raw
    return None


def as_string(value):
    if isinstance(value, String):
        return value.text
    return None


def as_number(value, base=None):
    '''
    the integer value of a Number, or None for anything else or a number
    that doesn't parse in the given base.  See Number.as_int for how the
    base is picked when it isn't given.
    '''
    if not isinstance(value, Number):
        return None
    try:
        return value.as_int(base)
    except ValueError:
        return None


def head(value):
    '''the raw text of a list's first element, if that's a symbol or number'''
    first = nth(value, 0)
    if isinstance(first, Leaf) and not isinstance(first, String):
        return first.raw
    return None


def find(value, predicate):
    for child in children(value):
        if predicate(child):
            return child
    return None


def find_all(value, predicate):
    return [child for child in children(value) if predicate(child)]


def find_head(value, name):
    '''the first child list whose head is name'''
    return find(value, lambda child: head(child) == name)


def lookup(value, *names):
    '''
    follow a path of heads down the tree:
    lookup(root, '8086', '1616') is find_head(find_head(root, '8086'), '1616')
    '''
    for name in names:
        value = find_head(value, name)
        if value is None:
            return None
    return value
