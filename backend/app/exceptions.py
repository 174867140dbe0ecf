from pydantic import BaseModel
from typing import Optional


class ProblemDetail(BaseModel):
    """RFC 7807 compliant error response."""

    type: str = "about:blank"
    title: str
    detail: Optional[str] = None
    status: int
    instance: Optional[str] = None
    code: str


class DomainException(Exception):
    """Base class for domain-specific exceptions."""

    def __init__(
        self,
        status_code: int,
        title: str,
        *,
        code: str,
        detail: str | None = None,
        type_: str = "about:blank",
    ) -> None:
        super().__init__(detail or title)
        self.status_code = status_code
        self.title = title
        self.detail = detail
        self.type = type_
        self.code = code


class ScoringError(DomainException):
    """Base class for errors raised at the scoring engine boundary."""


class InvalidSportError(ScoringError):
    def __init__(self, sport: object) -> None:
        super().__init__(
            status_code=404,
            title="Unknown sport",
            detail=f"no scoring engine registered for sport {sport!r}",
            code="invalid_sport",
        )
        self.sport = sport


class CorruptStateError(ScoringError):
    def __init__(self, detail: str) -> None:
        super().__init__(
            status_code=422,
            title="Corrupt score state",
            detail=detail,
            code="corrupt_state",
        )


class InvalidPointWinnerError(ScoringError):
    def __init__(self, value: object, detail: str | None = None) -> None:
        super().__init__(
            status_code=422,
            title="Invalid point winner",
            detail=detail
            or f"point winner must be 'player1' or 'player2' (got {value!r})",
            code="invalid_point_winner",
        )
        self.value = value
