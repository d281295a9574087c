"""
Temporary file name generators for the object database.

The database asks its name factory for a fresh name every time it starts
writing an object, so tests can swap in deterministic names.
"""

import itertools
from typing import Callable
from uuid import uuid4

TempNameFactory = Callable[[], str]

TEMP_PREFIX = 'tmp_obj_'


def random_temp_name() -> str:
    """Return a name no concurrent writer will pick."""
    return f"{TEMP_PREFIX}{uuid4().hex}"


def sequential_temp_names(prefix: str = TEMP_PREFIX) -> TempNameFactory:
    """Return a factory yielding `<prefix>0`, `<prefix>1`, ..."""
    counter = itertools.count()
    
    def next_name() -> str:
        return f"{prefix}{next(counter)}"
    
    return next_name
