from abc import ABC, abstractmethod

from src.app.repositories.notification_repository import INotificationRepository
from src.app.repositories.share_link_repository import IShareLinkRepository
from src.app.repositories.vehicle_repository import IVehicleRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    vehicles: IVehicleRepository
    share_links: IShareLinkRepository
    notifications: INotificationRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
