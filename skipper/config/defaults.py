"""Default safari routes with pre-resolved coordinates."""

from skipper.config.schema import RouteConfig

DEFAULT_ROUTES: list[RouteConfig] = [
    RouteConfig(
        route_id="latchi-blue-lagoon",
        name="Latchi to Blue Lagoon",
        latitude=35.0657,
        longitude=32.3326,
    ),
    RouteConfig(
        route_id="paphos-coral-bay",
        name="Paphos Harbour to Coral Bay",
        latitude=34.7536,
        longitude=32.4063,
    ),
    RouteConfig(
        route_id="peyia-sea-caves",
        name="Peyia Sea Caves",
        latitude=34.9,
        longitude=32.3,
    ),
    RouteConfig(
        route_id="limassol-dolphins",
        name="Limassol Dolphin Watch",
        latitude=34.6667,
        longitude=33.0417,
    ),
    RouteConfig(
        route_id="ayia-napa-cape-greco",
        name="Ayia Napa to Cape Greco",
        latitude=34.9627,
        longitude=34.0762,
    ),
]
