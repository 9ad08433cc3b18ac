from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


DEFAULT_DATA_FILE = "data/preprocessed.csv"


@dataclass(frozen=True)
class GlobalConfig:
    """
    Parsed config/global.json.

    Fields:

    - ui_title / subtitle: navbar text
    - data_file: catalog CSV, relative paths are resolved by the loader
    - top_countries: number of bars in the country chart
    - top_words: number of bars in the word-frequency chart
    - table_row_cap: maximum rows in the top-rated table
    """
    config_root: Path
    ui_title: str = "Streaming Catalog Explorer"
    subtitle: str = "Titles, genres and IMDB ratings"
    data_file: str = DEFAULT_DATA_FILE
    top_countries: int = 8
    top_words: int = 20
    table_row_cap: int = 200
