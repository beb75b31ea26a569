# Movie dataclass – read-only view of one TMDb result
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Mapping

from movieFinder.settings import MOVIE_PAGE_URL, POSTER_BASE_URL


@dataclass(frozen=True, slots=True)
class Movie:
    id: int | None
    title: str
    vote_average: float | None = None
    release_date: str | None = None
    original_language: str | None = None
    poster_path: str | None = None
    overview: str | None = None

    @classmethod
    def from_api(cls, raw: Mapping[str, Any]) -> "Movie":
        vote = raw.get("vote_average")
        return cls(
            id=raw.get("id"),
            title=raw.get("title") or raw.get("name") or "<untitled>",
            vote_average=float(vote) if isinstance(vote, (int, float)) else None,
            release_date=raw.get("release_date") or None,
            original_language=raw.get("original_language") or None,
            poster_path=raw.get("poster_path") or None,
            overview=raw.get("overview") or None,
        )

    @property
    def year(self) -> str:
        return self.release_date[:4] if self.release_date else "N/A"

    @property
    def rating_text(self) -> str:
        return f"{self.vote_average:.1f}" if self.vote_average else "N/A"

    @property
    def language(self) -> str:
        return (self.original_language or "N/A").upper()

    @property
    def poster_url(self) -> str | None:
        return f"{POSTER_BASE_URL}{self.poster_path}" if self.poster_path else None

    @property
    def tmdb_url(self) -> str | None:
        return f"{MOVIE_PAGE_URL}/{self.id}" if self.id is not None else None
