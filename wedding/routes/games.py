"""
Photo bingo, survey and trivia routes.
"""

from __future__ import annotations

import logging
import re
import time
from dataclasses import asdict

from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.concurrency import run_in_threadpool

from wedding.auth import GuestSession, require_guest
from wedding.content import WEDDING
from wedding.db import BingoEntryRecord, DbClient, SurveyAnswerRecord, TriviaResultRecord
from wedding.dependencies import get_change_feed, get_db_client, get_storage_client
from wedding.errors import AccessDeniedError, ConflictError, NotFoundError, ValidationFailedError
from wedding.games import (
    answers_by_guest,
    leaderboard,
    same_guest,
    score_trivia,
    tally_survey,
    validate_survey_answers,
)
from wedding.images import BINGO_MAX_SIZE_MB, compress_image
from wedding.realtime import ChangeFeed, change_event, publish_quietly
from wedding.schemas import (
    BingoBoardResponse,
    BingoChallengeStatus,
    BingoEntryResponse,
    LeaderboardEntry,
    LeaderboardResponse,
    QuestionResultResponse,
    SurveyQuestionResponse,
    SurveyQuestionsResponse,
    SurveyRequest,
    SurveyResultsResponse,
    TriviaQuestionResponse,
    TriviaQuestionsResponse,
    TriviaRequest,
    TriviaResultResponse,
)
from wedding.storage import BINGO_BUCKET, StorageClient

logger = logging.getLogger(__name__)

router = APIRouter()

_UNSAFE_PATH_CHARS = re.compile(r"[^A-Za-z0-9_-]+")


def bingo_storage_path(guest_name: str, challenge_id: int) -> str:
    safe_name = _UNSAFE_PATH_CHARS.sub("_", guest_name.strip()).strip("_") or "guest"
    return f"{safe_name}_{challenge_id}_{int(time.time() * 1000)}.jpg"


# Bingo


@router.get("/bingo", response_model=BingoBoardResponse)
def bingo_board(
    session: GuestSession = Depends(require_guest),
    db: DbClient = Depends(get_db_client),
):
    done = {e.challenge_id: e for e in db.list_bingo_entries(session.guest_name)}
    challenges = []
    for challenge in WEDDING.bingo_challenges:
        entry = done.get(challenge.id)
        challenges.append(
            BingoChallengeStatus(
                id=challenge.id,
                challenge=challenge.challenge,
                completed=entry is not None,
                photo_url=entry.photo_url if entry else None,
                completed_at=entry.completed_at if entry else None,
            )
        )
    completed = sum(1 for c in challenges if c.completed)
    return BingoBoardResponse(
        challenges=challenges, completed=completed, total=len(challenges)
    )


@router.post("/bingo/{challenge_id}", response_model=BingoEntryResponse, status_code=201)
async def complete_bingo_challenge(
    challenge_id: int,
    file: UploadFile = File(...),
    session: GuestSession = Depends(require_guest),
    db: DbClient = Depends(get_db_client),
    storage: StorageClient = Depends(get_storage_client),
):
    if WEDDING.bingo_challenge(challenge_id) is None:
        raise NotFoundError(f"Unknown challenge: {challenge_id}")
    already = {e.challenge_id for e in db.list_bingo_entries(session.guest_name)}
    if challenge_id in already:
        raise ConflictError("You already completed this challenge.")

    data = await file.read()
    try:
        compressed = await run_in_threadpool(
            compress_image, data, max_size_mb=BINGO_MAX_SIZE_MB
        )
    except ValueError as exc:
        raise ValidationFailedError(str(exc)) from exc

    path = bingo_storage_path(session.guest_name, challenge_id)
    await run_in_threadpool(
        storage.upload_bytes, BINGO_BUCKET, path, compressed, "image/jpeg"
    )
    try:
        entry = db.save_bingo_entry(
            BingoEntryRecord(
                guest_name=session.guest_name,
                challenge_id=challenge_id,
                photo_url=storage.public_url(BINGO_BUCKET, path),
            )
        )
    except ConflictError:
        await run_in_threadpool(storage.delete_object, BINGO_BUCKET, path)
        raise
    logger.info("%s completed bingo challenge %d", session.guest_name, challenge_id)
    return BingoEntryResponse(**asdict(entry))


# Survey


@router.get("/survey", response_model=SurveyQuestionsResponse)
def survey_questions(
    session: GuestSession = Depends(require_guest),
    db: DbClient = Depends(get_db_client),
):
    mine = answers_by_guest(db.list_survey_answers(), session.guest_name)
    return SurveyQuestionsResponse(
        questions=[
            SurveyQuestionResponse(id=q.id, question=q.question, options=list(q.options))
            for q in WEDDING.survey_questions
        ],
        already_answered=bool(mine),
    )


@router.post("/survey", response_model=SurveyResultsResponse, status_code=201)
def submit_survey(
    payload: SurveyRequest,
    session: GuestSession = Depends(require_guest),
    db: DbClient = Depends(get_db_client),
    feed: ChangeFeed = Depends(get_change_feed),
):
    existing = db.list_survey_answers()
    if answers_by_guest(existing, session.guest_name):
        raise ConflictError("You already answered the survey.")
    validated = validate_survey_answers(WEDDING.survey_questions, payload.answers)

    records = [
        SurveyAnswerRecord(guest_name=session.guest_name, question_id=qid, answer=answer)
        for qid, answer in validated.items()
    ]
    db.save_survey_answers(records)
    for record in records:
        publish_quietly(
            feed, "survey", change_event("INSERT", "survey_answers", asdict(record))
        )
    return _survey_results(existing + records, session.guest_name)


@router.get("/survey/results", response_model=SurveyResultsResponse)
def survey_results(
    session: GuestSession = Depends(require_guest),
    db: DbClient = Depends(get_db_client),
):
    answers = db.list_survey_answers()
    if not session.is_admin and not answers_by_guest(answers, session.guest_name):
        raise AccessDeniedError("Answer the survey to see the results.")
    return _survey_results(answers, session.guest_name)


def _survey_results(answers: list[SurveyAnswerRecord], guest_name: str) -> SurveyResultsResponse:
    return SurveyResultsResponse(
        results=[
            QuestionResultResponse(**asdict(r))
            for r in tally_survey(WEDDING.survey_questions, answers)
        ],
        my_answers=answers_by_guest(answers, guest_name),
    )


# Trivia


@router.get("/trivia", response_model=TriviaQuestionsResponse)
def trivia_questions(
    session: GuestSession = Depends(require_guest),
    db: DbClient = Depends(get_db_client),
):
    played = any(
        same_guest(r.guest_name, session.guest_name) for r in db.list_trivia_results()
    )
    return TriviaQuestionsResponse(
        questions=[
            TriviaQuestionResponse(id=q.id, question=q.question, options=list(q.options))
            for q in WEDDING.trivia_questions
        ],
        already_played=played,
    )


@router.post("/trivia", response_model=TriviaResultResponse, status_code=201)
def submit_trivia(
    payload: TriviaRequest,
    session: GuestSession = Depends(require_guest),
    db: DbClient = Depends(get_db_client),
):
    if any(same_guest(r.guest_name, session.guest_name) for r in db.list_trivia_results()):
        raise ConflictError("You already played the trivia.")

    score, correctness = score_trivia(WEDDING.trivia_questions, payload.answers)
    result = db.save_trivia_result(
        TriviaResultRecord(
            guest_name=session.guest_name,
            score=score,
            total=len(WEDDING.trivia_questions),
            answers={str(k): v for k, v in payload.answers.items()},
        )
    )
    logger.info("Trivia result for %s: %d/%d", result.guest_name, score, result.total)
    return TriviaResultResponse(
        guest_name=result.guest_name,
        score=result.score,
        total=result.total,
        correct_answers={q.id: q.answer for q in WEDDING.trivia_questions},
        correctness=correctness,
    )


@router.get("/trivia/leaderboard", response_model=LeaderboardResponse)
def trivia_leaderboard(db: DbClient = Depends(get_db_client)):
    return LeaderboardResponse(
        entries=[
            LeaderboardEntry(
                guest_name=r.guest_name,
                score=r.score,
                total=r.total,
                created_at=r.created_at,
            )
            for r in leaderboard(db.list_trivia_results())
        ]
    )
