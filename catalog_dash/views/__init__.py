from .titles_per_year_view import TitlesPerYearView
from .rating_category_view import RatingCategoryView
from .top_countries_view import TopCountriesView
from .genre_treemap_view import GenreTreemapView
from .imdb_by_type_view import ImdbByTypeView
from .word_frequency_view import WordFrequencyView

__all__ = [
    "TitlesPerYearView",
    "RatingCategoryView",
    "TopCountriesView",
    "GenreTreemapView",
    "ImdbByTypeView",
    "WordFrequencyView",
]
