import unittest
from unittest import mock

from wedding.content import WEDDING
from wedding.db import SurveyAnswerRecord, TriviaResultRecord
from wedding.errors import ConflictError, ValidationFailedError
from wedding.games import leaderboard, score_trivia, tally_survey, validate_survey_answers
from wedding.storage import BINGO_BUCKET
from wedding.tests.base import ADMIN, GUEST, OTHER_GUEST, ApiTestCase, make_image

SURVEY_ANSWERS = {"1": "Los dos", "2": "La pista", "3": "Al amanecer"}
PERFECT_TRIVIA = {"1": 2, "2": 0, "3": 3}


class BingoTests(ApiTestCase):
    def complete(self, challenge_id, headers=GUEST):
        return self.client.post(
            f"/api/bingo/{challenge_id}",
            headers=headers,
            files={"file": ("brindis.png", make_image(), "image/png")},
        )

    def test_board_tracks_progress(self):
        board = self.client.get("/api/bingo", headers=GUEST).json()
        self.assertEqual(board["completed"], 0)
        self.assertEqual(board["total"], len(WEDDING.bingo_challenges))

        response = self.complete(3)
        self.assertEqual(response.status_code, 201)
        entry = response.json()
        self.assertEqual(entry["challenge_id"], 3)

        board = self.client.get("/api/bingo", headers=GUEST).json()
        self.assertEqual(board["completed"], 1)
        done = [c for c in board["challenges"] if c["completed"]]
        self.assertEqual(done[0]["id"], 3)
        self.assertEqual(done[0]["photo_url"], entry["photo_url"])

        other = self.client.get("/api/bingo", headers=OTHER_GUEST).json()
        self.assertEqual(other["completed"], 0)

    def test_upload_lands_in_bingo_bucket(self):
        self.complete(1, headers={**GUEST, "X-Guest-Name": "Ana Maria"})
        [(bucket, path)] = list(self.storage.stored_objects)
        self.assertEqual(bucket, BINGO_BUCKET)
        self.assertTrue(path.startswith("Ana_Maria_1_"))
        self.assertTrue(path.endswith(".jpg"))
        self.assertEqual(self.db.count_guest_photos("guests", "Ana Maria"), 0)

    def test_unknown_and_repeated_challenges(self):
        self.assertEqual(self.complete(999).status_code, 404)
        self.assertEqual(self.complete(2).status_code, 201)
        self.assertEqual(self.complete(2).status_code, 409)

    def test_lost_race_removes_uploaded_photo(self):
        self.db.save_bingo_entry = mock.Mock(
            side_effect=ConflictError("Bingo challenge already completed")
        )
        response = self.complete(5)
        self.assertEqual(response.status_code, 409)
        self.assertEqual(self.storage.stored_objects, {})

    def test_rejects_non_image(self):
        response = self.client.post(
            "/api/bingo/1",
            headers=GUEST,
            files={"file": ("a.txt", b"nope", "text/plain")},
        )
        self.assertEqual(response.status_code, 400)


class SurveyTests(ApiTestCase):
    def test_answer_once_and_see_results(self):
        locked = self.client.get("/api/survey/results", headers=GUEST)
        self.assertEqual(locked.status_code, 403)

        response = self.client.post(
            "/api/survey", headers=GUEST, json={"answers": SURVEY_ANSWERS}
        )
        self.assertEqual(response.status_code, 201)
        results = response.json()
        self.assertEqual(results["my_answers"]["1"], "Los dos")
        first = results["results"][0]
        self.assertEqual(first["total"], 1)
        votes = {o["option"]: (o["votes"], o["percent"]) for o in first["options"]}
        self.assertEqual(votes["Los dos"], (1, 100))
        self.assertEqual(votes["Julian"], (0, 0))

        survey_events = [c for c, _ in self.feed.published if c == "survey"]
        self.assertEqual(len(survey_events), 3)

        repeat = self.client.post(
            "/api/survey",
            headers={**GUEST, "X-Guest-Name": " ANA "},
            json={"answers": SURVEY_ANSWERS},
        )
        self.assertEqual(repeat.status_code, 409)

        questions = self.client.get("/api/survey", headers=GUEST).json()
        self.assertTrue(questions["already_answered"])

    def test_incomplete_or_invalid_answers(self):
        partial = self.client.post(
            "/api/survey", headers=GUEST, json={"answers": {"1": "Los dos"}}
        )
        self.assertEqual(partial.status_code, 400)
        invalid = self.client.post(
            "/api/survey",
            headers=GUEST,
            json={"answers": {**SURVEY_ANSWERS, "2": "El postre"}},
        )
        self.assertEqual(invalid.status_code, 400)
        self.assertEqual(self.db.survey_answers, [])

    def test_repeat_with_invalid_answers_is_a_conflict(self):
        self.client.post("/api/survey", headers=GUEST, json={"answers": SURVEY_ANSWERS})
        repeat = self.client.post(
            "/api/survey", headers=GUEST, json={"answers": {"1": "El postre"}}
        )
        self.assertEqual(repeat.status_code, 409)
        self.assertEqual(len(self.db.survey_answers), len(SURVEY_ANSWERS))

    def test_admin_sees_results_without_answering(self):
        self.client.post("/api/survey", headers=GUEST, json={"answers": SURVEY_ANSWERS})
        response = self.client.get("/api/survey/results", headers=ADMIN)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["my_answers"], {})


class TriviaTests(ApiTestCase):
    def test_questions_hide_answer_key(self):
        payload = self.client.get("/api/trivia", headers=GUEST).json()
        self.assertFalse(payload["already_played"])
        self.assertNotIn("answer", payload["questions"][0])

    def test_play_once_and_leaderboard(self):
        response = self.client.post(
            "/api/trivia", headers=GUEST, json={"answers": {"1": 2, "2": 1}}
        )
        self.assertEqual(response.status_code, 201)
        result = response.json()
        self.assertEqual((result["score"], result["total"]), (1, 3))
        self.assertEqual(result["correct_answers"], {"1": 2, "2": 0, "3": 3})
        self.assertEqual(result["correctness"], {"1": True, "2": False, "3": False})

        again = self.client.post("/api/trivia", headers=GUEST, json={"answers": PERFECT_TRIVIA})
        self.assertEqual(again.status_code, 409)

        self.client.post("/api/trivia", headers=OTHER_GUEST, json={"answers": PERFECT_TRIVIA})
        board = self.client.get("/api/trivia/leaderboard").json()["entries"]
        self.assertEqual([e["guest_name"] for e in board], ["Bruno", "Ana"])

    def test_unknown_question_rejected(self):
        response = self.client.post(
            "/api/trivia", headers=GUEST, json={"answers": {"42": 0}}
        )
        self.assertEqual(response.status_code, 400)


class GameLogicTests(unittest.TestCase):
    def test_validate_survey_answers(self):
        questions = WEDDING.survey_questions
        answers = {q.id: q.options[0] for q in questions}
        self.assertEqual(validate_survey_answers(questions, answers), answers)
        with self.assertRaises(ValidationFailedError):
            validate_survey_answers(questions, {**answers, 99: "x"})

    def test_tally_rounds_percentages(self):
        question = WEDDING.survey_questions[0]
        answers = [
            SurveyAnswerRecord(guest_name=name, question_id=question.id, answer=option)
            for name, option in (
                ("a", question.options[0]),
                ("b", question.options[0]),
                ("c", question.options[1]),
            )
        ]
        [result] = tally_survey([question], answers)
        self.assertEqual(result.total, 3)
        self.assertEqual([o.percent for o in result.options], [67, 33, 0, 0])

    def test_score_trivia_counts_unanswered_as_wrong(self):
        score, correctness = score_trivia(WEDDING.trivia_questions, {1: 2})
        self.assertEqual(score, 1)
        self.assertFalse(correctness[3])

    def test_leaderboard_breaks_ties_by_time(self):
        results = [
            TriviaResultRecord(guest_name="late", score=2, total=3, created_at=20.0),
            TriviaResultRecord(guest_name="early", score=2, total=3, created_at=10.0),
            TriviaResultRecord(guest_name="best", score=3, total=3, created_at=30.0),
        ]
        self.assertEqual(
            [r.guest_name for r in leaderboard(results)], ["best", "early", "late"]
        )


if __name__ == "__main__":
    unittest.main()
