from __future__ import annotations

from boxcars.entrypoints.http.dtos.common import CamelModel
from boxcars.entrypoints.http.dtos.vehicles import VehicleResponseDTO


class FavoritesDataDTO(CamelModel):
    favorites: list[VehicleResponseDTO]
