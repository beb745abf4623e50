from dataclasses import asdict, dataclass
from typing import Optional


@dataclass(frozen=True)
class CardView:
    rank: str
    suit: str
    face_up: bool


@dataclass(frozen=True)
class StackView:
    cards: tuple[CardView, ...]


@dataclass(frozen=True)
class SelectionView:
    stack: int
    rank: str
    suit: str


@dataclass(frozen=True)
class HintView:
    kind: str
    stack: int = -1
    to_stack: int = -1


@dataclass(frozen=True)
class GameViewModel:
    stacks: tuple[StackView, ...]
    deck_count: int
    discard_count: int
    selection: Optional[SelectionView]
    hint: Optional[HintView]
    move_count: int
    started: bool
    start_time: Optional[float]
    elapsed_sec: float
    status: str

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class EventView:
    type: str
    payload: dict
