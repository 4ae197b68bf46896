"""Collection, company, network, keyword, genre, credit and review endpoints."""

from __future__ import annotations

from tmdbkit.shared.constants import TMDBPaths

from ..executor import Options, RequestExecutor
from ..models import (
    AlternativeNamesResponse,
    CollectionDetails,
    CompanyDetails,
    CreditDetails,
    GenreList,
    ImagesResponse,
    KeywordDetails,
    MovieResult,
    NetworkDetails,
    PagedResponse,
    ReviewDetails,
    TranslationsResponse,
)


class CollectionsMixin(RequestExecutor):
    def get_collection_details(
        self,
        collection_id: int,
        options: Options | None = None,
    ) -> CollectionDetails:
        return self._get(
            self._url(f"{TMDBPaths.COLLECTION}{collection_id}", options),
            CollectionDetails,
        )

    def get_collection_images(
        self,
        collection_id: int,
        options: Options | None = None,
    ) -> ImagesResponse:
        return self._get(
            self._url(f"{TMDBPaths.COLLECTION}{collection_id}/images", options),
            ImagesResponse,
        )

    def get_collection_translations(
        self,
        collection_id: int,
        options: Options | None = None,
    ) -> TranslationsResponse:
        return self._get(
            self._url(f"{TMDBPaths.COLLECTION}{collection_id}/translations", options),
            TranslationsResponse,
        )


class CompaniesMixin(RequestExecutor):
    def get_company_details(
        self,
        company_id: int,
        options: Options | None = None,
    ) -> CompanyDetails:
        return self._get(self._url(f"{TMDBPaths.COMPANY}{company_id}", options), CompanyDetails)

    def get_company_alternative_names(
        self,
        company_id: int,
        options: Options | None = None,
    ) -> AlternativeNamesResponse:
        return self._get(
            self._url(f"{TMDBPaths.COMPANY}{company_id}/alternative_names", options),
            AlternativeNamesResponse,
        )

    def get_company_images(
        self,
        company_id: int,
        options: Options | None = None,
    ) -> ImagesResponse:
        return self._get(
            self._url(f"{TMDBPaths.COMPANY}{company_id}/images", options),
            ImagesResponse,
        )


class NetworksMixin(RequestExecutor):
    def get_network_details(
        self,
        network_id: int,
        options: Options | None = None,
    ) -> NetworkDetails:
        return self._get(self._url(f"{TMDBPaths.NETWORK}{network_id}", options), NetworkDetails)

    def get_network_alternative_names(
        self,
        network_id: int,
        options: Options | None = None,
    ) -> AlternativeNamesResponse:
        return self._get(
            self._url(f"{TMDBPaths.NETWORK}{network_id}/alternative_names", options),
            AlternativeNamesResponse,
        )

    def get_network_images(
        self,
        network_id: int,
        options: Options | None = None,
    ) -> ImagesResponse:
        return self._get(
            self._url(f"{TMDBPaths.NETWORK}{network_id}/images", options),
            ImagesResponse,
        )


class KeywordsMixin(RequestExecutor):
    def get_keyword_details(
        self,
        keyword_id: int,
        options: Options | None = None,
    ) -> KeywordDetails:
        return self._get(self._url(f"{TMDBPaths.KEYWORD}{keyword_id}", options), KeywordDetails)

    def get_keyword_movies(
        self,
        keyword_id: int,
        options: Options | None = None,
    ) -> PagedResponse[MovieResult]:
        """Movies tagged with a keyword. TMDB recommends discover for this."""
        return self._get(
            self._url(f"{TMDBPaths.KEYWORD}{keyword_id}/movies", options),
            PagedResponse[MovieResult],
        )


class GenresMixin(RequestExecutor):
    def get_genre_movie_list(self, options: Options | None = None) -> GenreList:
        return self._get(self._url(f"{TMDBPaths.GENRE}movie/list", options), GenreList)

    def get_genre_tv_list(self, options: Options | None = None) -> GenreList:
        return self._get(self._url(f"{TMDBPaths.GENRE}tv/list", options), GenreList)


class CreditsMixin(RequestExecutor):
    def get_credit_details(self, credit_id: str, options: Options | None = None) -> CreditDetails:
        return self._get(self._url(f"{TMDBPaths.CREDIT}{credit_id}", options), CreditDetails)


class ReviewsMixin(RequestExecutor):
    def get_review_details(self, review_id: str, options: Options | None = None) -> ReviewDetails:
        return self._get(self._url(f"{TMDBPaths.REVIEW}{review_id}", options), ReviewDetails)
