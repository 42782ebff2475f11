"""Route catalog: resolves a route identifier to its name and coordinates."""

from typing import Protocol

from skipper.config.schema import RouteConfig, SkipperConfig
from skipper.models.analysis import Route, RouteCoordinates


class RouteCatalog(Protocol):
    def get(self, route_id: str) -> Route | None: ...

    def list_routes(self) -> list[Route]: ...


class ConfigRouteCatalog:
    """Catalog backed by the `routes` section of the config."""

    def __init__(self, config: SkipperConfig):
        self._routes = {r.route_id: _to_route(r) for r in config.routes}

    def get(self, route_id: str) -> Route | None:
        return self._routes.get(route_id)

    def list_routes(self) -> list[Route]:
        return list(self._routes.values())


def _to_route(rc: RouteConfig) -> Route:
    coords = None
    if rc.latitude is not None and rc.longitude is not None:
        coords = RouteCoordinates(latitude=rc.latitude, longitude=rc.longitude)
    return Route(route_id=rc.route_id, name=rc.name, coordinates=coords)
