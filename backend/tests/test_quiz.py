"""Tests for the quiz routes and the Redis-backed quiz engine."""

from app.core.quiz_engine import QuizEngine


# ---------------------------------------------------------------------------
# Quiz engine
# ---------------------------------------------------------------------------


async def test_engine_records_and_steps_back(fake_redis):
    engine = QuizEngine(fake_redis)
    assert await engine.load_answers(1) == []

    await engine.record_answer(1, 2)
    answers = await engine.record_answer(1, 0)
    assert answers == [2, 0]
    assert await engine.load_answers(1) == [2, 0]

    assert await engine.step_back(1) == [2]
    assert await engine.load_answers(1) == [2]


async def test_engine_sessions_expire(fake_redis):
    engine = QuizEngine(fake_redis)
    await engine.record_answer(7, 1)
    assert fake_redis.ttls["quiz:answers:7"] == 86400


async def test_engine_step_back_on_empty_session(fake_redis):
    assert await QuizEngine(fake_redis).step_back(1) == []


async def test_engine_clear(fake_redis):
    engine = QuizEngine(fake_redis)
    await engine.record_answer(1, 3)
    await engine.clear(1)
    assert await engine.load_answers(1) == []


async def test_engine_sessions_are_per_user(fake_redis):
    engine = QuizEngine(fake_redis)
    await engine.record_answer(1, 3)
    await engine.record_answer(2, 0)
    assert await engine.load_answers(1) == [3]
    assert await engine.load_answers(2) == [0]


# ---------------------------------------------------------------------------
# Stateless routes
# ---------------------------------------------------------------------------


async def test_get_questions(client):
    resp = await client.get("/api/quiz/questions")
    assert resp.status_code == 200
    questions = resp.json()
    assert len(questions) == 10
    assert questions[0]["id"] == 1
    assert len(questions[0]["options"]) == 4


async def test_get_questions_localized(client):
    resp = await client.get("/api/quiz/questions", params={"locale": "ru"})
    assert resp.json()[0]["text"] == "Как часто вы предпочитаете общаться с друзьями?"


async def test_classify(client):
    resp = await client.post("/api/quiz/classify", json={"answers": [0] * 10})
    assert resp.status_code == 200
    data = resp.json()
    assert data["category"] == "soul_mate"
    assert data["category_name"] == "Soul Mate"
    assert data["personality"]["personality_type"] == "ENERGETIC STRATEGIST"
    assert data["personality"]["social_style"] == "extrovert"


async def test_classify_empty_answers(client):
    resp = await client.post("/api/quiz/classify", json={"answers": []})
    assert resp.status_code == 200
    assert resp.json()["category"] == "good_buddy"
    assert resp.json()["personality"]["personality_type"] == "BALANCED"


async def test_classify_rejects_out_of_scale_answers(client):
    resp = await client.post("/api/quiz/classify", json={"answers": [0, 4, 1]})
    assert resp.status_code == 422

    resp = await client.post("/api/quiz/classify", json={"answers": [-1]})
    assert resp.status_code == 422


# ---------------------------------------------------------------------------
# Step-by-step flow
# ---------------------------------------------------------------------------


async def test_progress_for_new_user(client, user_id):
    resp = await client.get(f"/api/quiz/{user_id}/progress")
    assert resp.status_code == 200
    assert resp.json() == {
        "answers": [],
        "total_questions": 10,
        "next_question": 0,
        "is_complete": False,
    }


async def test_progress_user_not_found(client):
    resp = await client.get("/api/quiz/999/progress")
    assert resp.status_code == 404


async def test_answer_and_go_back(client, user_id):
    await client.post(f"/api/quiz/{user_id}/answer", json={"answer": 2})
    resp = await client.post(f"/api/quiz/{user_id}/answer", json={"answer": 1})
    assert resp.json()["answers"] == [2, 1]
    assert resp.json()["next_question"] == 2

    resp = await client.post(f"/api/quiz/{user_id}/back")
    assert resp.status_code == 200
    assert resp.json()["answers"] == [2]
    assert resp.json()["next_question"] == 1


async def test_answer_validation(client, user_id):
    resp = await client.post(f"/api/quiz/{user_id}/answer", json={"answer": 5})
    assert resp.status_code == 422


async def test_answer_after_last_question(client, user_id):
    for _ in range(10):
        resp = await client.post(f"/api/quiz/{user_id}/answer", json={"answer": 1})
    assert resp.json()["is_complete"] is True
    assert resp.json()["next_question"] is None

    resp = await client.post(f"/api/quiz/{user_id}/answer", json={"answer": 1})
    assert resp.status_code == 400


async def test_complete_unfinished_quiz(client, user_id):
    await client.post(f"/api/quiz/{user_id}/answer", json={"answer": 1})
    resp = await client.post(f"/api/quiz/{user_id}/complete")
    assert resp.status_code == 400


async def test_complete_stores_profile(client, user_id, fake_redis):
    for answer in [3, 0, 3, 0, 0, 3, 3, 0, 0, 0]:
        await client.post(f"/api/quiz/{user_id}/answer", json={"answer": answer})

    resp = await client.post(f"/api/quiz/{user_id}/complete")
    assert resp.status_code == 200
    data = resp.json()
    assert data["category"] == "close_friend"
    assert data["personality"]["personality_type"] == "FOCUSED LEADER"

    # Session is cleared once the result is stored
    assert f"quiz:answers:{user_id}" not in fake_redis.store

    user = (await client.get(f"/api/user/{user_id}")).json()
    assert user["category"] == "close_friend"
    assert user["category_name"] == "Close Friend"
    assert user["personality"]["personality_type"] == "FOCUSED LEADER"
    assert user["quiz_completed_at"] is not None


async def test_complete_uses_user_locale(client):
    user_id = (await client.post("/api/user/", json={"name": "Ivan", "locale": "ru"})).json()["id"]
    for _ in range(10):
        await client.post(f"/api/quiz/{user_id}/answer", json={"answer": 0})

    resp = await client.post(f"/api/quiz/{user_id}/complete")
    assert resp.json()["category_name"] == "Душа в душу"
    assert resp.json()["locale"] == "ru"
