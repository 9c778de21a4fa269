"""
Summary statistics over a user's finished games.

Pure functions of the stored history: nothing is cached or persisted, every
call recomputes from the raw results. Empty histories yield zeros rather
than errors.
"""

from collections import Counter
from collections.abc import Sequence

from gamehub.models import DIFFICULTIES, PictureGameResult, QuizResult
from gamehub.schemas import (
    DifficultyBreakdown,
    GameSummary,
    OverallStats,
    PictureStats,
    QuizStats,
)


def average_score(total_score: int, total_games: int) -> float:
    """Mean score rounded to two decimals, 0 for no games."""
    if total_games == 0:
        return 0.0
    return round(total_score / total_games, 2)


def _summary(results: Sequence) -> GameSummary:
    scores = [r.score for r in results]
    total_score = sum(scores)
    return GameSummary(
        total_games=len(scores),
        average_score=average_score(total_score, len(scores)),
        best_score=max(scores, default=0),
    )


def quiz_stats(results: Sequence[QuizResult]) -> QuizStats:
    summary = _summary(results)
    counts = Counter(r.difficulty for r in results)
    return QuizStats(
        **summary.model_dump(),
        total_score=sum(r.score for r in results),
        by_difficulty=DifficultyBreakdown(
            **{difficulty: counts.get(difficulty, 0) for difficulty in DIFFICULTIES}
        ),
    )


def picture_stats(results: Sequence[PictureGameResult]) -> PictureStats:
    summary = _summary(results)
    return PictureStats(
        **summary.model_dump(),
        total_score=sum(r.score for r in results),
        highest_level=max((r.level for r in results), default=0),
        # every identification record counts, right or wrong
        total_images_identified=sum(len(r.images_identified or []) for r in results),
    )


def overall_stats(
    quiz_results: Sequence[QuizResult],
    picture_results: Sequence[PictureGameResult],
) -> OverallStats:
    """Two independent summaries side by side plus the combined game count."""
    quiz = _summary(quiz_results)
    picture = _summary(picture_results)
    return OverallStats(
        quiz=quiz,
        picture=picture,
        total_games_played=quiz.total_games + picture.total_games,
    )
