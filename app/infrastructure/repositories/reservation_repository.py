from typing import Any, Dict, List
from app.interfaces.IReservationRepository import IReservationRepository
from app.infrastructure.repositories.order_repository import WITHOUT_ID


class MongoReservationRepository(IReservationRepository):
    """Reservations are written by another system, this service only reads them."""

    def __init__(self, collection):
        self.collection = collection

    async def find_all(self) -> List[Dict[str, Any]]:
        return await self.collection.find({}, WITHOUT_ID).to_list(length=None)
