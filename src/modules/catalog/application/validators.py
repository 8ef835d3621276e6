"""Input rules for catalog commands.

Rule sets are stateless and built once at import time; handlers share them.
"""

from decimal import Decimal

from src.core.validation import (
    FieldRule,
    RuleSet,
    max_length,
    min_value,
    validate_finite,
    validate_not_empty,
)
from src.modules.catalog.application.commands import CreateProduct, RenameProduct
from src.modules.catalog.domain.errors import ProductErrorCode
from src.modules.catalog.domain.product import NAME_MAX_LENGTH

CREATE_PRODUCT_RULES: RuleSet[CreateProduct] = RuleSet(
    FieldRule(field="name", getter=lambda cmd: cmd.name, check=validate_not_empty),
    FieldRule(field="name", getter=lambda cmd: cmd.name, check=max_length(NAME_MAX_LENGTH)),
    FieldRule(
        field="price",
        getter=lambda cmd: cmd.price,
        check=validate_finite,
        code=ProductErrorCode.PRICE_INVALID,
    ),
    FieldRule(
        field="price",
        getter=lambda cmd: cmd.price,
        check=min_value(Decimal(0)),
        code=ProductErrorCode.PRICE_NEGATIVE,
    ),
)

RENAME_PRODUCT_RULES: RuleSet[RenameProduct] = RuleSet(
    FieldRule(field="name", getter=lambda cmd: cmd.name, check=validate_not_empty),
    FieldRule(field="name", getter=lambda cmd: cmd.name, check=max_length(NAME_MAX_LENGTH)),
)
