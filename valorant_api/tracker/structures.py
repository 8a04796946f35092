from enum import Enum
from typing import Annotated, Any, Optional

from pydantic import (
    Field,
    PlainSerializer,
    PlainValidator,
    StrictBool,
    StrictInt,
    StrictStr,
    field_validator,
    model_serializer,
)

from valorant_api.tracker.envelope import ApiModel
from valorant_api.tracker.season import SeasonToken, format_season, parse_season


class AccountRegion(str, Enum):
    EU = "eu"
    NA = "na"
    KR = "kr"
    AS = "as"
    AP = "ap"
    LATAM = "latam"
    BR = "br"

    def __str__(self) -> str:
        return self.value


def _validate_season(value: Any) -> SeasonToken:
    if isinstance(value, SeasonToken):
        return value
    return parse_season(value)


# season tokens travel as their ``e5a3`` text
Season = Annotated[
    SeasonToken,
    PlainValidator(_validate_season),
    PlainSerializer(format_season, return_type=str),
]


class ProfileBanner(ApiModel):
    """Player card artwork URLs."""
    small: StrictStr
    large: StrictStr
    wide: StrictStr
    id: StrictStr


class AccountData(ApiModel):
    """
    Payload of ``/v1/account/{name}/{tag}``.
    """
    puuid: StrictStr
    region: AccountRegion
    account_level: StrictInt
    name: StrictStr
    tag: StrictStr
    card: ProfileBanner
    last_update: StrictStr
    last_update_raw: StrictInt


class RankImages(ApiModel):
    small: StrictStr
    large: StrictStr
    triangle_down: StrictStr
    triangle_up: StrictStr


class CurrentActData(ApiModel):
    """Rank state for the running act. ``currenttier*`` are the API's own spellings."""
    current_tier: StrictInt = Field(alias="currenttier")
    current_tier_patched: StrictStr = Field(alias="currenttierpatched")
    images: RankImages
    ranking_in_tier: StrictInt
    mmr_change_to_last_game: StrictInt
    elo: StrictInt
    games_needed_for_rating: StrictInt
    old: StrictBool


class HighestRank(ApiModel):
    old: StrictBool
    tier: StrictInt
    patched_tier: StrictStr
    season: Season


class ActRankWin(ApiModel):
    patched_tier: StrictStr
    tier: StrictInt


class SeasonData(ApiModel):
    """
    Summary of one act. When the API has nothing for the act, only ``error``
    is set (e.g. ``"No data Available"``).
    """
    error: Optional[StrictStr] = None
    wins: Optional[StrictInt] = None
    number_of_games: Optional[StrictInt] = None
    final_rank: Optional[StrictInt] = None
    final_rank_patched: Optional[StrictStr] = None
    act_rank_wins: list[ActRankWin] = Field(default_factory=list)
    old: Optional[StrictBool] = None

    @property
    def has_data(self) -> bool:
        return self.error is None

    @field_validator("error", mode="before")
    @classmethod
    def error_flag(cls, value: Any) -> Any:
        # the API sends ``"error": false`` alongside real data
        return None if value is False else value

    @field_validator("act_rank_wins", mode="before")
    @classmethod
    def empty_wins(cls, value: Any) -> Any:
        return [] if value is None else value

    @model_serializer(mode="wrap")
    def serialize_summary(self, handler) -> dict[str, Any]:
        if self.error is not None:
            return {"error": self.error}
        out = handler(self)
        out.pop("error", None)
        return out


class SeasonMMRData(SeasonData):
    """Payload of ``/v2/mmr/{region}/{name}/{tag}?filter=<season>``."""


class MMRData(ApiModel):
    """
    Payload of ``/v2/mmr/{region}/{name}/{tag}``.

    ``by_season`` keeps the API's own keys; acts the season codec cannot
    represent (episode 10 onwards) would otherwise make the whole payload
    undecodable. Use :meth:`season` to look one up by token.
    """
    puuid: StrictStr
    name: StrictStr
    tag: StrictStr
    current_data: CurrentActData
    highest_rank: Optional[HighestRank] = None
    by_season: dict[str, SeasonData] = Field(default_factory=dict)

    @field_validator("by_season", mode="before")
    @classmethod
    def empty_seasons(cls, value: Any) -> Any:
        return {} if value is None else value

    def season(self, token: SeasonToken) -> Optional[SeasonData]:
        return self.by_season.get(str(token))
