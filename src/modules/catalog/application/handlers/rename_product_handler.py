"""RenameProduct command handler.

Flow:
1. Validate the command against RENAME_PRODUCT_RULES
2. Load the product (NotFoundError if unknown)
3. Apply Product.rename
4. Store the change, then publish ProductRenamed
"""

from src.core.errors import DomainError, NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.protocols import EventBusProtocol, LoggerProtocol
from src.modules.catalog.application.commands import RenameProduct
from src.modules.catalog.application.dtos import ProductResult
from src.modules.catalog.application.validators import RENAME_PRODUCT_RULES
from src.modules.catalog.domain.errors import ProductErrorCode
from src.modules.catalog.domain.protocols import ProductRepository


class RenameProductHandler:
    """Handler for the RenameProduct command."""

    def __init__(
        self,
        repository: ProductRepository,
        event_bus: EventBusProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._repository = repository
        self._event_bus = event_bus
        self._logger = logger

    async def handle(self, cmd: RenameProduct) -> Result[ProductResult, DomainError]:
        """Handle the RenameProduct command.

        Returns:
            Success(ProductResult) with the stored product.
            Failure(ValidationError | NotFoundError | DomainError) otherwise.
        """
        validation = RENAME_PRODUCT_RULES.validate(cmd)
        if isinstance(validation, Failure):
            return validation

        product = await self._repository.find_by_id(cmd.product_id)
        if product is None:
            return Failure(
                error=NotFoundError(
                    code=ProductErrorCode.NOT_FOUND,
                    message=f"Product {cmd.product_id} not found",
                    resource_type="Product",
                    resource_id=str(cmd.product_id),
                )
            )

        renamed = product.rename(cmd.name)
        if isinstance(renamed, Failure):
            return renamed

        stored = await self._repository.update(product)
        if isinstance(stored, Failure):
            return stored

        await self._event_bus.publish_all(renamed.value.events)

        self._logger.info("product_renamed", product_id=str(product.id))
        return Success(value=ProductResult.from_entity(product))
