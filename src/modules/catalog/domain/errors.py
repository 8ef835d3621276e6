"""Catalog error codes (machine-readable, dotted ``entity.field.reason``)."""

from enum import Enum


class ProductErrorCode(str, Enum):
    """Product domain error codes."""

    NAME_EMPTY = "product.name.empty"
    NAME_TOO_LONG = "product.name.too_long"
    PRICE_NEGATIVE = "product.price.negative"
    PRICE_INVALID = "product.price.invalid"
    NOT_FOUND = "product.not_found"
    ALREADY_EXISTS = "product.already_exists"
