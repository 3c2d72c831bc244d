"""
Pydantic schemas for the wedding API.
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    access_code: str = Field(..., max_length=128)
    name: str = Field(..., max_length=120)


class SessionResponse(BaseModel):
    authenticated: bool
    guest_name: str
    is_admin: bool


class PinRequest(BaseModel):
    pin: str = Field(..., max_length=64)


class PinResponse(BaseModel):
    valid: bool


class CountdownResponse(BaseModel):
    days: int
    hours: int
    minutes: int
    seconds: int
    is_past: bool
    wedding_date: str


class WeddingInfoResponse(BaseModel):
    couple: dict
    bank_details: dict
    thank_you_text: str
    collaboration_text: str
    programme: list[dict]
    maps_embed_url: Optional[str] = None


# RSVP


class RsvpRequest(BaseModel):
    attending: bool
    plus_one: bool = False
    plus_one_name: Optional[str] = Field(default=None, max_length=120)
    children: bool = False
    children_count: int = Field(default=1, ge=1, le=20)
    dietary_restrictions: Optional[str] = Field(default=None, max_length=500)
    message: Optional[str] = Field(default=None, max_length=1000)


class RsvpResponse(BaseModel):
    id: str
    guest_name: str
    attending: bool
    plus_one: bool
    plus_one_name: Optional[str] = None
    children: bool
    children_count: int
    dietary_restrictions: Optional[str] = None
    message: Optional[str] = None
    created_at: float
    updated_at: float


class RsvpSummary(BaseModel):
    attending: int
    declined: int
    headcount: int


class RsvpListResponse(BaseModel):
    entries: list[RsvpResponse]
    summary: RsvpSummary


# Wall + playlist


class MessageRequest(BaseModel):
    message: str = Field(..., max_length=500)
    emoji: Optional[str] = None


class MessageResponse(BaseModel):
    id: str
    guest_name: str
    message: str
    emoji: str
    created_at: float


class PlaylistRequest(BaseModel):
    song: str = Field(..., max_length=200)
    artist: Optional[str] = Field(default=None, max_length=200)


class PlaylistEntryResponse(BaseModel):
    id: str
    guest_name: str
    song: str
    artist: Optional[str] = None
    created_at: float


# Photos


class PhotoResponse(BaseModel):
    id: str
    gallery: str
    guest_name: str
    photo_url: str
    caption: Optional[str] = None
    bingo_challenge_id: Optional[int] = None
    created_at: float


class PhotoPageResponse(BaseModel):
    photos: list[PhotoResponse]
    offset: int
    has_more: bool


class QuotaResponse(BaseModel):
    uploaded: int
    limit: Optional[int] = None
    remaining: Optional[int] = None


class FileUploadResultResponse(BaseModel):
    file_name: str
    status: Literal["done", "error", "skipped"]
    photo: Optional[PhotoResponse] = None
    error: Optional[str] = None


class UploadSummaryResponse(BaseModel):
    uploaded: int
    failed: int
    skipped: int
    results: list[FileUploadResultResponse]


class GalleryPhoto(BaseModel):
    name: str
    url: str


class GalleryResponse(BaseModel):
    photos: list[GalleryPhoto]


class SharedFileInfo(BaseModel):
    name: str
    content_type: str
    size: int


class SharedInboxResponse(BaseModel):
    token: str
    files: list[SharedFileInfo]


# Bingo


class BingoChallengeStatus(BaseModel):
    id: int
    challenge: str
    completed: bool
    photo_url: Optional[str] = None
    completed_at: Optional[float] = None


class BingoBoardResponse(BaseModel):
    challenges: list[BingoChallengeStatus]
    completed: int
    total: int


class BingoEntryResponse(BaseModel):
    id: str
    guest_name: str
    challenge_id: int
    photo_url: str
    completed_at: float


# Survey + trivia


class SurveyQuestionResponse(BaseModel):
    id: int
    question: str
    options: list[str]


class SurveyQuestionsResponse(BaseModel):
    questions: list[SurveyQuestionResponse]
    already_answered: bool


class SurveyRequest(BaseModel):
    answers: dict[int, str]


class OptionResultResponse(BaseModel):
    option: str
    votes: int
    percent: int


class QuestionResultResponse(BaseModel):
    question_id: int
    question: str
    total: int
    options: list[OptionResultResponse]


class SurveyResultsResponse(BaseModel):
    results: list[QuestionResultResponse]
    my_answers: dict[int, str]


class TriviaQuestionResponse(BaseModel):
    id: int
    question: str
    options: list[str]


class TriviaQuestionsResponse(BaseModel):
    questions: list[TriviaQuestionResponse]
    already_played: bool


class TriviaRequest(BaseModel):
    answers: dict[int, int]


class TriviaResultResponse(BaseModel):
    guest_name: str
    score: int
    total: int
    correct_answers: dict[int, int]
    correctness: dict[int, bool]


class LeaderboardEntry(BaseModel):
    guest_name: str
    score: int
    total: int
    created_at: float


class LeaderboardResponse(BaseModel):
    entries: list[LeaderboardEntry]


# Our story


class MilestoneRequest(BaseModel):
    id: Optional[str] = None
    order: int = Field(..., ge=1)
    title: str = Field(..., max_length=200)
    date: Optional[str] = Field(default=None, max_length=64)
    description: Optional[str] = Field(default=None, max_length=2000)
    image_url: Optional[str] = None
    spotify_url: Optional[str] = None


class MilestoneResponse(BaseModel):
    id: str
    order: int
    title: str
    date: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    spotify_url: Optional[str] = None
    spotify_embed_url: Optional[str] = None


class StoryResponse(BaseModel):
    milestones: list[MilestoneResponse]
    is_default: bool


class ReorderRequest(BaseModel):
    ids: list[str]


class ImageUploadResponse(BaseModel):
    url: str


# To-do list


class TodoRequest(BaseModel):
    text: str = Field(..., max_length=300)


class TodoResponse(BaseModel):
    id: str
    text: str
    completed: bool
    created_at: float


class TodoListResponse(BaseModel):
    pending: list[TodoResponse]
    completed: list[TodoResponse]
    progress: int
    suggestions: list[str]


class StatusResponse(BaseModel):
    status: Literal["ok"]
