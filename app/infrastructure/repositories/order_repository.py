from typing import Any, Dict, List, Optional
from app.domain.stats import total_revenue
from app.interfaces.IOrderRepository import IOrderRepository

# Internal Mongo id never leaves the list endpoints
WITHOUT_ID = {"_id": 0}


class MongoOrderRepository(IOrderRepository):

    def __init__(self, collection):
        self.collection = collection

    async def insert(self, order: Dict[str, Any]) -> Dict[str, Any]:
        result = await self.collection.insert_one(order)
        order.setdefault("_id", result.inserted_id)
        return order

    async def find_all(self) -> List[Dict[str, Any]]:
        return await self.collection.find({}, WITHOUT_ID).to_list(length=None)

    async def find_latest_by_phone(self, phone: str) -> Optional[Dict[str, Any]]:
        """
        Most recently inserted order for this exact phone value.
        ObjectIds grow with insertion time, so sorting on _id DESC gives newest first.
        """
        orders = await self.collection.find({"phone": phone}).sort("_id", -1).limit(1).to_list(length=1)
        return orders[0] if orders else None

    async def count(self, predicate: Optional[Dict[str, Any]] = None) -> int:
        return await self.collection.count_documents(predicate or {})

    async def count_with_item_status(self, status: str) -> int:
        # Matches orders where ANY item has this status, so one order can land in several buckets
        return await self.count({"items.status": status})

    async def revenue(self) -> float:
        """Full scan over every order. See app.domain.stats."""
        orders = await self.collection.find({}, {"items": 1}).to_list(length=None)
        return total_revenue(orders)
