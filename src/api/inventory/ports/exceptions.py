"""Domain exceptions for the inventory bounded context."""


class InventoryItemNotFoundError(Exception):
    pass
