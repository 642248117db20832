import pytest
from unittest.mock import AsyncMock, MagicMock


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.vehicles = MagicMock()
    uow.vehicles.get_by_id = AsyncMock(return_value=None)
    uow.vehicles.get_owned = AsyncMock(return_value=None)

    uow.share_links = MagicMock()
    uow.share_links.get_by_token = AsyncMock(return_value=None)
    uow.share_links.get_owned = AsyncMock(return_value=None)
    uow.share_links.get_active_by_vehicle = AsyncMock(return_value=None)
    uow.share_links.list_by_vehicle = AsyncMock(return_value=[])
    uow.share_links.create = AsyncMock(side_effect=lambda share: share)
    uow.share_links.update = AsyncMock(side_effect=lambda share: share)
    uow.share_links.delete = AsyncMock()

    uow.notifications = MagicMock()
    uow.notifications.create = AsyncMock(side_effect=lambda n: n)
    uow.notifications.count_unread = AsyncMock(return_value=0)
    uow.notifications.get_page = AsyncMock(return_value=[])
    uow.notifications.mark_read = AsyncMock(return_value=0)
    uow.notifications.mark_all_read = AsyncMock(return_value=0)
    return uow
