"""
Exceptions raised by catalog operations.
"""


class CatalogError(Exception):
    """Base exception for catalog operation errors."""
    pass


class InvalidRatingError(CatalogError):
    """Raised when a rating falls outside the accepted 1-5 range."""

    def __init__(self, rating):
        self.rating = rating
        super().__init__("Rating must be between 1 and 5.")


class DuplicateIdError(CatalogError):
    """Raised when adding a movie whose id is already in the catalog."""

    def __init__(self, movie_id: str):
        self.movie_id = movie_id
        super().__init__("Movie with this ID already exists.")


class NotFoundError(CatalogError):
    """Raised when an operation targets a movie id that is not in the catalog."""

    def __init__(self, movie_id: str):
        self.movie_id = movie_id
        super().__init__("Movie not found.")
