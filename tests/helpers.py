"""Request helpers shared by the API tests."""

from fastapi.testclient import TestClient


def signup(client: TestClient, username: str, password: str = "secret123") -> str:
    """Register a user through the API and return their bearer token."""
    response = client.post(
        "/api/auth/signup", json={"username": username, "password": password}
    )
    assert response.status_code == 201, response.text
    return response.json()["token"]


def auth_headers(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def quiz_payload(score: int, difficulty: str = "easy", **overrides) -> dict:
    payload = {
        "score": score,
        "totalQuestions": 10,
        "difficulty": difficulty,
        "topic": "Animals",
        "answers": [
            {
                "questionId": "q1",
                "question": "Which animal barks?",
                "userAnswer": "Dog",
                "correctAnswer": "Dog",
                "isCorrect": True,
            }
        ],
    }
    payload.update(overrides)
    return payload


def picture_payload(score: int, level: int = 1, images: int = 2, **overrides) -> dict:
    payload = {
        "score": score,
        "level": level,
        "imagesIdentified": [
            {
                "imageId": f"img-{i}",
                "imageName": f"Image {i}",
                "category": "fruit",
                "isCorrect": i % 2 == 0,
                "timeSpent": 3.5,
            }
            for i in range(images)
        ],
        "totalTime": 42.0,
    }
    payload.update(overrides)
    return payload
