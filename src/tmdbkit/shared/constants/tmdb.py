"""TMDB-related constants."""


class TMDB:
    """TMDB API configuration constants."""

    API_BASE_URL = "https://api.themoviedb.org/3"
    PERMISSION_URL = "https://www.themoviedb.org/authenticate/"
    API_KEY_PARAM = "api_key"


class TMDBPaths:
    """Path segments of the TMDB v3 resources."""

    AUTHENTICATION = "/authentication/"
    CERTIFICATION = "/certification/"
    COLLECTION = "/collection/"
    COMPANY = "/company/"
    CONFIGURATION = "/configuration/"
    CREDIT = "/credit/"
    DISCOVER = "/discover/"
    FIND = "/find/"
    GENRE = "/genre/"
    GUEST_SESSION = "/guest_session/"
    KEYWORD = "/keyword/"
    LIST = "/list/"
    MOVIE = "/movie/"
    NETWORK = "/network/"
    PERSON = "/person/"
    REVIEW = "/review/"
    SEARCH = "/search/"
    TRENDING = "/trending/"
    TV = "/tv/"
    TV_EPISODE_GROUP = "/tv/episode_group/"
    TV_SEASON = "/season/"
    TV_EPISODE = "/episode/"


class TMDBErrorMessages:
    """TMDB client error message constants."""

    API_KEY_EMPTY = "APIKey is empty"
    URL_EMPTY = "url field is empty"
    DECODE_FAILED = "could not decode the data: {error}"
    EMPTY_ERROR_BODY = "[{status_code}]: empty body {reason}"
    UNDECODABLE_ERROR = "couldn't decode error: ({length}) [{body}]"
    RETRY_BUDGET_EXHAUSTED = (
        "retry budget exhausted after {attempts} attempts: TMDB API keeps answering 429"
    )
    TIMEOUT = "TMDB API request timeout: {error}"
    CONNECTION_FAILED = "TMDB API connection failed: {error}"


class TMDBOperationNames:
    """Operation names used in logs and error contexts."""

    GET = "tmdb_get"
    POST = "tmdb_post"
    DECODE_ERROR = "tmdb_decode_error"
    CLIENT_INIT = "tmdb_client_init"


__all__ = ["TMDB", "TMDBErrorMessages", "TMDBOperationNames", "TMDBPaths"]
