import string
from dataclasses import dataclass

from valorant_api.errors import InvalidFormat, InvalidLength

EPISODE_MARKER = "e"
ACT_MARKER = "a"
VALID_ACTS = (1, 2, 3)


@dataclass(frozen=True, slots=True)
class SeasonToken:
    """
    An episode/act pair, written on the wire as ``e<episode>a<act>`` (``e5a3``).
    Both fields are single digits and the act is always 1, 2 or 3.
    """
    episode: int
    act: int

    def __post_init__(self):
        text = f"{EPISODE_MARKER}{self.episode}{ACT_MARKER}{self.act}"
        if isinstance(self.episode, bool) or not isinstance(self.episode, int) or not 0 <= self.episode <= 9:
            raise InvalidFormat(f"Invalid episode in season token {text!r}", text)
        if isinstance(self.act, bool) or not isinstance(self.act, int) or self.act not in VALID_ACTS:
            raise InvalidFormat(f"Invalid act in season token {text!r}", text)

    @classmethod
    def parse(cls, text: str) -> "SeasonToken":
        return parse_season(text)

    def format(self) -> str:
        return format_season(self)

    def __str__(self) -> str:
        return self.format()


def parse_season(text: str) -> SeasonToken:
    """
    Parse a season token such as ``e5a3``.

    :raises InvalidLength: the text is not exactly 4 characters long
    :raises InvalidFormat: a marker is wrong, a digit is not numeric or the act is not 1-3
    """
    if not isinstance(text, str):
        raise InvalidFormat(f"Season token must be a string, got {type(text).__name__}", repr(text))
    if len(text) != 4:
        raise InvalidLength(f"Season token {text!r} must be 4 characters long, got {len(text)}", text)

    if text[0] != EPISODE_MARKER:
        raise InvalidFormat(f"Season token {text!r} must start with {EPISODE_MARKER!r}", text)
    if text[2] != ACT_MARKER:
        raise InvalidFormat(f"Season token {text!r} must have {ACT_MARKER!r} at position 2", text)
    if text[1] not in string.digits:
        raise InvalidFormat(f"Episode in season token {text!r} is not a digit", text)
    if text[3] not in string.digits:
        raise InvalidFormat(f"Act in season token {text!r} is not a digit", text)

    act = int(text[3])
    if act not in VALID_ACTS:
        raise InvalidFormat(f"Act in season token {text!r} must be 1, 2 or 3", text)

    return SeasonToken(episode=int(text[1]), act=act)


def format_season(token: SeasonToken) -> str:
    return f"{EPISODE_MARKER}{token.episode}{ACT_MARKER}{token.act}"
