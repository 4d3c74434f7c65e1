# -*- coding: utf-8 -*-

"""Sample S documents shared by the tests"""


PCI = '\n'.join([
    '(pci-drivers',
    '\t(1af4 ; Red Hat',
    '\t\t(1000 "drivers/pci/virtio/net")',
    '\t\t(1001 "drivers/pci/virtio/blk")',
    '\t\t(1050 "drivers/pci/virtio/gpu"))',
    '\t(8086 ; Intel',
    '\t\t(1616 "drivers/pci/intel/hd graphics"))) ; intentional space',
])

# the same table with no comments and its own idea of layout
PCI_SQUASHED = ('(pci-drivers (1af4 (1000 "drivers/pci/virtio/net") (1001 "drivers/pci/virtio/blk")'
                ' (1050 "drivers/pci/virtio/gpu")) (8086 (1616 "drivers/pci/intel/hd graphics")))')

MIXED = '\n'.join([
    '; leading comment',
    '(settings',
    '  (name "router \\"main\\"")',
    "  (motto 'it\\'s fine')",
    '  ; before the empty list',
    '  (flags ())',
    '  (ports 22 80 0x1bb -1))',
    '(second-form a b) ; trailing',
    '; footer',
])

ROUND_TRIP_INPUTS = [
    '(a (b c))',
    '()',
    '',
    'bare-atom',
    '(a) (b) c',
    '(8086 ; Intel\n  (1616 "x"))',
    '(a b ; tail\n)',
    '(\n; first\na)',
    '((((deep))))',
    '("tab\tinside" "esc\\n" \'single\')',
    PCI,
    PCI_SQUASHED,
    MIXED,
]
