from abc import ABC, abstractmethod
from typing import Any, Dict, List

class IReservationRepository(ABC):
    @abstractmethod
    async def find_all(self) -> List[Dict[str, Any]]:
        pass
