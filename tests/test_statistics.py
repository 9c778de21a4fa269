"""
Statistics aggregation over in-memory results. No database involved.
"""

import pytest

from gamehub.models import PictureGameResult, QuizResult
from gamehub.services.statistics import (
    average_score,
    overall_stats,
    picture_stats,
    quiz_stats,
)


def _quiz(score: int, difficulty: str) -> QuizResult:
    return QuizResult(score=score, total_questions=10, difficulty=difficulty)


def _picture(score: int, level: int, images: int) -> PictureGameResult:
    return PictureGameResult(
        score=score,
        level=level,
        images_identified=[{"imageId": str(i), "isCorrect": i == 0} for i in range(images)],
    )


def test_quiz_stats_example_history():
    results = [_quiz(10, "easy"), _quiz(20, "easy"), _quiz(30, "hard")]

    stats = quiz_stats(results)

    assert stats.total_games == 3
    assert stats.total_score == 60
    assert stats.average_score == 20.00
    assert stats.best_score == 30
    assert stats.by_difficulty.model_dump() == {"easy": 2, "medium": 0, "hard": 1}


def test_quiz_stats_serialize_with_camel_case_keys():
    data = quiz_stats([_quiz(5, "medium")]).model_dump(by_alias=True)

    assert data == {
        "totalGames": 1,
        "averageScore": 5.0,
        "bestScore": 5,
        "totalScore": 5,
        "byDifficulty": {"easy": 0, "medium": 1, "hard": 0},
    }


def test_empty_histories_report_zero():
    quiz = quiz_stats([])
    picture = picture_stats([])

    assert quiz.total_games == 0
    assert quiz.average_score == 0
    assert quiz.best_score == 0
    assert quiz.by_difficulty.model_dump() == {"easy": 0, "medium": 0, "hard": 0}
    assert picture.average_score == 0
    assert picture.best_score == 0
    assert picture.highest_level == 0
    assert picture.total_images_identified == 0


@pytest.mark.parametrize(
    "total, games, expected",
    [(10, 3, 3.33), (20, 3, 6.67), (7, 2, 3.5), (0, 0, 0)],
)
def test_average_score_rounds_to_two_decimals(total, games, expected):
    assert average_score(total, games) == expected


def test_picture_stats_counts_every_identified_image():
    results = [_picture(50, 2, 3), _picture(80, 4, 5), _picture(20, 1, 0)]

    stats = picture_stats(results)

    assert stats.total_games == 3
    assert stats.total_score == 150
    assert stats.average_score == 50.0
    assert stats.best_score == 80
    assert stats.highest_level == 4
    assert stats.total_images_identified == 8


def test_overall_stats_are_independent_summaries():
    quiz_results = [_quiz(10, "easy"), _quiz(30, "hard")]
    picture_results = [_picture(100, 3, 2)]

    stats = overall_stats(quiz_results, picture_results)

    assert stats.quiz.model_dump() == {
        "total_games": 2,
        "average_score": 20.0,
        "best_score": 30,
    }
    assert stats.picture.model_dump() == {
        "total_games": 1,
        "average_score": 100.0,
        "best_score": 100,
    }
    assert stats.total_games_played == 3


def test_overall_stats_with_no_games():
    stats = overall_stats([], [])

    assert stats.total_games_played == 0
    assert stats.quiz.best_score == 0
    assert stats.picture.average_score == 0


def test_average_score_is_always_a_float():
    assert isinstance(average_score(0, 0), float)
    assert isinstance(average_score(30, 3), float)
