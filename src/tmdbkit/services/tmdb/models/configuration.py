"""Configuration and certification payloads."""

from __future__ import annotations

from pydantic import Field

from .base import TMDBModel


class ImagesConfiguration(TMDBModel):
    base_url: str = ""
    secure_base_url: str = ""
    backdrop_sizes: list[str] = Field(default_factory=list)
    logo_sizes: list[str] = Field(default_factory=list)
    poster_sizes: list[str] = Field(default_factory=list)
    profile_sizes: list[str] = Field(default_factory=list)
    still_sizes: list[str] = Field(default_factory=list)


class APIConfiguration(TMDBModel):
    """System wide configuration (image base URLs and sizes)."""

    images: ImagesConfiguration = Field(default_factory=ImagesConfiguration)
    change_keys: list[str] = Field(default_factory=list)


class Country(TMDBModel):
    iso_3166_1: str = ""
    english_name: str = ""
    native_name: str = ""


class Department(TMDBModel):
    department: str = ""
    jobs: list[str] = Field(default_factory=list)


class Language(TMDBModel):
    iso_639_1: str = ""
    english_name: str = ""
    name: str = ""


class Timezone(TMDBModel):
    iso_3166_1: str = ""
    zones: list[str] = Field(default_factory=list)


class Certification(TMDBModel):
    certification: str = ""
    meaning: str = ""
    order: int = 0


class CertificationsResponse(TMDBModel):
    """Certifications keyed by ISO 3166-1 country code."""

    certifications: dict[str, list[Certification]] = Field(default_factory=dict)
