import logging
import uuid

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from mollie_components.constants import CARD_TOKEN_FIELD, CUSTOM_FIELDS_KEY
from mollie_components.models import Customer
from mollie_components.schemas import CustomerUpdateResult

logger = logging.getLogger(__name__)


class CustomerService:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_customer(self, customer_id: uuid.UUID | str) -> Customer | None:
        return await Customer.get_by_id(self.session, customer_id)

    async def set_card_token(self, customer: Customer, card_token: str) -> CustomerUpdateResult:
        """
        Store a Mollie card token in the customer's custom fields.

        Database errors are rolled back and reported in the result instead
        of being raised.
        """
        customer_id = customer.id
        custom_fields = dict(customer.custom_fields or {})
        mollie_fields = dict(custom_fields.get(CUSTOM_FIELDS_KEY) or {})
        mollie_fields[CARD_TOKEN_FIELD] = card_token
        custom_fields[CUSTOM_FIELDS_KEY] = mollie_fields

        # Assign a new dict so the JSON column is flagged as modified
        customer.custom_fields = custom_fields

        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.exception(f"Failed to store card token {customer_id = }")
            return CustomerUpdateResult(errors=[str(e)])

        logger.info(f"Card token stored {customer_id = }")
        return CustomerUpdateResult()

    @staticmethod
    def get_card_token(customer: Customer) -> str | None:
        return ((customer.custom_fields or {}).get(CUSTOM_FIELDS_KEY) or {}).get(CARD_TOKEN_FIELD)
