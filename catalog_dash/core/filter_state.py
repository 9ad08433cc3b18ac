from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from typing import Any, Dict, List, Optional, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from catalog_dash.core.dataset import Dataset

ALL_TYPES = "All"


def _optional_int(value: Any) -> Optional[int]:
    if value is None or value == "":
        return None
    return int(value)


def _optional_str(value: Any) -> Optional[str]:
    if value is None or value == "":
        return None
    return str(value)


@dataclass(frozen=True)
class FilterState:
    """
    Represents the current narrowing criteria plus drill-down selections.

    Fields:

    - type: "All" or an exact category label
    - year_min / year_max: inclusive release-year bounds (None = inactive)
    - imdb_min: inclusive IMDB rating floor, records without a rating ignore it

    - clicked_genre / clicked_country / clicked_title: drill-downs set by chart
      clicks; they are only cleared by reset (or the rating-category click),
      never as a side effect of another filter changing

    Instances are immutable. Every transition returns a new FilterState so a
    render always sees one consistent snapshot.
    """

    type: str = ALL_TYPES
    year_min: Optional[int] = None
    year_max: Optional[int] = None
    imdb_min: float = 0

    clicked_genre: Optional[str] = None
    clicked_country: Optional[str] = None
    clicked_title: Optional[str] = None

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def initial(cls, dataset: Dataset) -> FilterState:
        """
        Type "All", no drill-downs, imdb floor 0, year bounds at the dataset extrema.
        """
        return cls(year_min=dataset.year_min, year_max=dataset.year_max)

    @classmethod
    def reset(cls, dataset: Dataset) -> FilterState:
        # Extrema come from the dataset, never from the state being reset
        return cls.initial(dataset)

    # ------------------------------------------------------------------
    # Control transitions
    # ------------------------------------------------------------------
    def with_type(self, value: Optional[str]) -> FilterState:
        return replace(self, type=value or ALL_TYPES)

    def with_year_min(self, value: Any) -> FilterState:
        return replace(self, year_min=_optional_int(value))

    def with_year_max(self, value: Any) -> FilterState:
        return replace(self, year_max=_optional_int(value))

    def with_imdb_min(self, value: Any) -> FilterState:
        if value is None or value == "":
            return replace(self, imdb_min=0)
        return replace(self, imdb_min=float(value))

    # ------------------------------------------------------------------
    # Click transitions
    # ------------------------------------------------------------------
    def pin_year(self, year: Any) -> FilterState:
        year = _optional_int(year)
        return replace(self, year_min=year, year_max=year)

    def drill_genre(self, genre: Optional[str]) -> FilterState:
        return replace(self, clicked_genre=_optional_str(genre))

    def drill_country(self, country: Optional[str]) -> FilterState:
        return replace(self, clicked_country=_optional_str(country))

    def drill_title(self, title: Optional[str]) -> FilterState:
        return replace(self, clicked_title=_optional_str(title))

    def clear_drilldowns(self) -> FilterState:
        return replace(self, clicked_genre=None, clicked_country=None, clicked_title=None)

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------
    def active_drilldowns(self) -> List[Tuple[str, str]]:
        pairs = [
            ("Genre", self.clicked_genre),
            ("Country", self.clicked_country),
            ("Title", self.clicked_title),
        ]
        return [(label, value) for label, value in pairs if value]

    # ------------------------------------------------------------------
    # dcc.Store (de)serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> FilterState:
        imdb_min = data.get("imdb_min")
        return cls(
            type=data.get("type") or ALL_TYPES,
            year_min=_optional_int(data.get("year_min")),
            year_max=_optional_int(data.get("year_max")),
            imdb_min=float(imdb_min) if imdb_min not in (None, "") else 0,
            clicked_genre=_optional_str(data.get("clicked_genre")),
            clicked_country=_optional_str(data.get("clicked_country")),
            clicked_title=_optional_str(data.get("clicked_title")),
        )
