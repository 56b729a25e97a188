from typing import Optional

from src.platform.database.mongo_setting import MongoDatabase
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_payment_repo import IPaymentRepo
from src.service.ticketing.domain.entity.payment_entity import PaymentEntity


class PaymentRepoImpl(IPaymentRepo):
    def __init__(self, database: MongoDatabase) -> None:
        self.database = database

    @Logger.io
    async def create(self, *, payment: PaymentEntity) -> str:
        result = await self.database.payments.insert_one(payment.to_document())
        return str(result.inserted_id)

    @Logger.io
    async def get_by_booking_id(self, *, booking_id: str) -> Optional[PaymentEntity]:
        document = await self.database.payments.find_one({'bookingId': booking_id})
        return PaymentEntity.from_document(document) if document else None
