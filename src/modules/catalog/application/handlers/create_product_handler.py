"""CreateProduct command handler.

Flow:
1. Validate the command against CREATE_PRODUCT_RULES
2. Create the Product through its validating factory
3. Store it through the repository port
4. Publish the ProductCreated event (after the product is stored)
5. Return Success(product_id)

Any failure short-circuits and is returned unchanged; nothing is stored
and no event is published.
"""

from uuid import UUID

from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.protocols import EventBusProtocol, LoggerProtocol
from src.modules.catalog.application.commands import CreateProduct
from src.modules.catalog.application.validators import CREATE_PRODUCT_RULES
from src.modules.catalog.domain.product import Product
from src.modules.catalog.domain.protocols import ProductRepository


class CreateProductHandler:
    """Handler for the CreateProduct command."""

    def __init__(
        self,
        repository: ProductRepository,
        event_bus: EventBusProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._repository = repository
        self._event_bus = event_bus
        self._logger = logger

    async def handle(self, cmd: CreateProduct) -> Result[UUID, DomainError]:
        """Handle the CreateProduct command.

        Args:
            cmd: Name and price of the new product.

        Returns:
            Success(product_id) on creation.
            Failure(ValidationError) when input rules fail.
            Failure(DomainError) when a product invariant fails or the
            store rejects the product.
        """
        validation = CREATE_PRODUCT_RULES.validate(cmd)
        if isinstance(validation, Failure):
            self._logger.warning(
                "product_create_rejected",
                code=validation.error.code_value,
                reason=validation.error.message,
            )
            return validation

        created = Product.create(cmd.name, cmd.price)
        if isinstance(created, Failure):
            self._logger.warning(
                "product_create_rejected",
                code=created.error.code_value,
                reason=created.error.message,
            )
            return created

        change = created.value
        product = change.entity

        stored = await self._repository.add(product)
        if isinstance(stored, Failure):
            self._logger.warning(
                "product_store_failed",
                product_id=str(product.id),
                code=stored.error.code_value,
            )
            return stored

        await self._event_bus.publish_all(change.events)

        self._logger.info("product_created", product_id=str(product.id))
        return Success(value=product.id)
