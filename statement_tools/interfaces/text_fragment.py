from dataclasses import dataclass
from typing import Iterable, List, NamedTuple, Tuple


class Position(NamedTuple):
    """A point on a PDF page. The origin is the bottom left corner, Y grows upward."""
    x: float
    y: float


@dataclass(frozen=True)
class TextFragment:
    """Text pulled from a statement page along with where it was drawn"""
    position: Position
    text: str

    @property
    def x(self) -> float:
        return self.position.x

    @property
    def y(self) -> float:
        return self.position.y

    @classmethod
    def at(cls, x: float, y: float, text: str) -> "TextFragment":
        return cls(Position(float(x), float(y)), text)


def fragments_from_triples(triples: Iterable[Tuple[float, float, str]]) -> List[TextFragment]:
    """Build a page's fragment list from decoded ``(x, y, text)`` triples, keeping their order"""
    return [TextFragment.at(x, y, text) for x, y, text in triples]
