from typing import List, Optional

from pymongo import ReturnDocument

from src.platform.database.mongo_setting import MongoDatabase, to_object_id
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_booking_repo import IBookingRepo
from src.service.ticketing.domain.entity.booking_entity import BookingEntity
from src.service.ticketing.domain.enum.booking_status import BookingStatus


class BookingRepoImpl(IBookingRepo):
    def __init__(self, database: MongoDatabase) -> None:
        self.database = database

    @Logger.io
    async def create(self, *, booking: BookingEntity) -> str:
        result = await self.database.bookings.insert_one(booking.to_document())
        return str(result.inserted_id)

    @Logger.io
    async def get_by_id(self, *, booking_id: str) -> Optional[BookingEntity]:
        document = await self.database.bookings.find_one({'_id': to_object_id(booking_id)})
        return BookingEntity.from_document(document) if document else None

    @Logger.io
    async def list_by_email(self, *, email: str) -> List[BookingEntity]:
        documents = await self.database.bookings.find({'email': email}).to_list(length=None)
        return [BookingEntity.from_document(document) for document in documents]

    @Logger.io
    async def claim_for_payment(self, *, booking_id: str) -> Optional[BookingEntity]:
        # Bookings written before statuses existed have no `status` field
        document = await self.database.bookings.find_one_and_update(
            {
                '_id': to_object_id(booking_id),
                'status': {'$in': [BookingStatus.REQUESTED.value, None]},
            },
            {'$set': {'status': BookingStatus.PAYMENT_PROCESSING.value}},
            return_document=ReturnDocument.AFTER,
        )
        return BookingEntity.from_document(document) if document else None

    @Logger.io
    async def set_status(self, *, booking_id: str, status: BookingStatus) -> bool:
        result = await self.database.bookings.update_one(
            {'_id': to_object_id(booking_id)},
            {'$set': {'status': status.value}},
        )
        return result.matched_count == 1

    @Logger.io
    async def delete(self, *, booking_id: str) -> int:
        result = await self.database.bookings.delete_one({'_id': to_object_id(booking_id)})
        return result.deleted_count
