from boxcars.infra.db.models.base import Base
from boxcars.infra.db.models.contact import ContactRow
from boxcars.infra.db.models.user import UserRow, user_favorites
from boxcars.infra.db.models.vehicle import VehicleRow

__all__ = ["Base", "ContactRow", "UserRow", "VehicleRow", "user_favorites"]
