"""Utilities for the package."""

import re


def clean_type_str(obj) -> str:
    if isinstance(obj, type):
        type_descr = obj.__qualname__
    else:
        type_descr = repr(obj)

    # clean out all modulenames
    p = re.compile(r"([a-zA-Z0-9_]+\.)([a-zA-Z0-9_]+)")
    num_repl = 1
    while num_repl > 0:
        type_descr, num_repl = p.subn(r"\2", type_descr)

    return type_descr
