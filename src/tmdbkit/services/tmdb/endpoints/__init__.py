"""Endpoint mixins, one per TMDB resource family."""

from .account import AuthenticationMixin, GuestSessionsMixin, ListsMixin
from .catalog import (
    CollectionsMixin,
    CompaniesMixin,
    CreditsMixin,
    GenresMixin,
    KeywordsMixin,
    NetworksMixin,
    ReviewsMixin,
)
from .configuration import CertificationsMixin, ChangesMixin, ConfigurationMixin
from .movies import MoviesMixin
from .people import PeopleMixin
from .search import DiscoverMixin, FindMixin, SearchMixin, TrendingMixin
from .tv import TVMixin
from .tv_seasons import TVEpisodesMixin, TVSeasonsMixin

__all__ = [
    "AuthenticationMixin",
    "CertificationsMixin",
    "ChangesMixin",
    "CollectionsMixin",
    "CompaniesMixin",
    "ConfigurationMixin",
    "CreditsMixin",
    "DiscoverMixin",
    "FindMixin",
    "GenresMixin",
    "GuestSessionsMixin",
    "KeywordsMixin",
    "ListsMixin",
    "MoviesMixin",
    "NetworksMixin",
    "PeopleMixin",
    "ReviewsMixin",
    "SearchMixin",
    "TVEpisodesMixin",
    "TVMixin",
    "TVSeasonsMixin",
    "TrendingMixin",
]
