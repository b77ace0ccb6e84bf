from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

class IOrderRepository(ABC):
    @abstractmethod
    async def insert(self, order: Dict[str, Any]) -> Dict[str, Any]:
        pass

    @abstractmethod
    async def find_all(self) -> List[Dict[str, Any]]:
        pass

    @abstractmethod
    async def find_latest_by_phone(self, phone: str) -> Optional[Dict[str, Any]]:
        pass

    @abstractmethod
    async def count(self, predicate: Optional[Dict[str, Any]] = None) -> int:
        pass

    @abstractmethod
    async def count_with_item_status(self, status: str) -> int:
        pass

    @abstractmethod
    async def revenue(self) -> float:
        pass
