# domain/exceptions.py
from __future__ import annotations


class ValidationError(Exception):
    pass
