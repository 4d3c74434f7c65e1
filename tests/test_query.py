from sconf import (List, Number, String, Symbol, as_number, as_string, as_symbol,
                   children, find, find_all, find_head, head, lookup, nth, parse)

from samples import PCI


def pci_root():
    return parse(PCI).root


def test_children():
    root = pci_root()
    assert len(children(root)) == 3
    assert children(Symbol('leaf')) == ()
    assert children(None) == ()


def test_nth():
    root = pci_root()
    assert nth(root, 0) == Symbol('pci-drivers')
    assert head(nth(root, -1)) == '8086'
    assert nth(root, 3) is None
    assert nth(root, -4) is None
    assert nth(Symbol('leaf'), 0) is None


def test_as_symbol():
    assert as_symbol(Symbol('pci-drivers')) == 'pci-drivers'
    assert as_symbol(String('pci-drivers')) is None
    assert as_symbol(Number('1')) is None


def test_as_string():
    assert as_string(String('drivers/pci/virtio/net')) == 'drivers/pci/virtio/net'
    assert as_string(Symbol('x')) is None
    assert as_string(List()) is None


def test_as_number():
    assert as_number(Number('1000')) == 1000
    assert as_number(Number('1000'), base=16) == 0x1000
    assert as_number(Number('1af4')) == 0x1af4
    assert as_number(Number('0x1F')) == 31
    assert as_number(Number('-12')) == -12
    assert as_number(Number('1af4'), base=10) is None
    assert as_number(Number('12z')) is None
    assert as_number(Symbol('1000')) is None
    assert as_number(String('1000')) is None


def test_number_as_int():
    assert int(Number('8086')) == 8086
    assert Number('8086').as_int(16) == 0x8086


def test_head():
    assert head(List([Symbol('a'), Symbol('b')])) == 'a'
    assert head(List([Number('1af4')])) == '1af4'
    assert head(List([String('a')])) is None
    assert head(List()) is None
    assert head(Symbol('a')) is None


def test_find():
    root = pci_root()
    assert find(root, lambda v: isinstance(v, List)) is root[1]
    assert find(root, lambda v: isinstance(v, String)) is None
    assert find(Symbol('leaf'), lambda v: True) is None


def test_find_all():
    red_hat = find_head(pci_root(), '1af4')
    assert [head(v) for v in find_all(red_hat, lambda v: isinstance(v, List))] == ['1000', '1001', '1050']
    assert find_all(red_hat, lambda v: False) == []


def test_find_head():
    root = pci_root()
    assert find_head(root, '8086') is root[2]
    assert find_head(root, 'pci-drivers') is None
    assert find_head(root, 'dead') is None


def test_lookup():
    root = pci_root()
    assert as_string(nth(lookup(root, '1af4', '1001'), 1)) == 'drivers/pci/virtio/blk'
    assert as_string(nth(lookup(root, '8086', '1616'), 1)) == 'drivers/pci/intel/hd graphics'
    assert lookup(root, '8086', '1000') is None
    assert lookup(root) is root


def test_queries_do_not_modify():
    root = pci_root()
    before = repr(root)
    find_all(root, lambda v: True)
    lookup(root, '1af4', '1050')
    children(root)
    assert repr(root) == before
