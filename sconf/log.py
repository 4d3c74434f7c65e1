"""
Debug output for sconf.  Silent unless turned on with set_debug().
"""


def _debug_noop(*args):
    pass


def _debug_stdout(arg):
    f = arg
    if not callable(arg):
        f = lambda: arg
    print("DEBUG: ", f())


_debug = _debug_noop


def debug(arg):
    '''
    emit arg, or the result of calling it if it's callable, when debugging
    is enabled; pass a lambda to avoid formatting costs when it's not
    '''
    _debug(arg)


def set_debug(enabled=True):
    global _debug
    _debug = _debug_stdout if enabled else _debug_noop


def debugging():
    return _debug is not _debug_noop
