"""
errors.py - Store faults
Single responsibility: exceptions raised by the store for policy violations.
"""


class StoreError(ValueError):
    """Base class for faults reported by the store."""


class DuplicateNameError(StoreError):
    def __init__(self, kind: str, name: str):
        super().__init__(f"A {kind} named {name!r} already exists")
        self.kind = kind
        self.name = name


class InvalidValueError(StoreError):
    pass


class NotFoundError(StoreError):
    def __init__(self, kind: str, entity_id: int):
        super().__init__(f"{kind.capitalize()} {entity_id} not found")
        self.kind = kind
        self.entity_id = entity_id
