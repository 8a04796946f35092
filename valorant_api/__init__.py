__version__ = "0.1.0"

from valorant_api.config import ApiConfig
from valorant_api.errors import (
    ConfigError,
    InvalidFormat,
    InvalidLength,
    MalformedEnvelope,
    SeasonTokenError,
    TransportError,
    ValorantApiError,
)
from valorant_api.tracker import (
    AccountData,
    AccountRegion,
    ApiError,
    Failure,
    MMRData,
    ResponseEnvelope,
    SeasonMMRData,
    SeasonToken,
    Success,
    fetch_account,
    fetch_mmr,
    fetch_season_mmr,
)
from valorant_api.tracker.envelope import decode_envelope, decode_envelope_json
from valorant_api.tracker.season import format_season, parse_season
