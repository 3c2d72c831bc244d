"""
Database abstraction for Postgres and an in-memory test implementation.
"""

from __future__ import annotations

import time
import uuid
from dataclasses import dataclass, field
from typing import Dict, Optional, Protocol

from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    Float,
    Integer,
    String,
    UniqueConstraint,
    create_engine,
    delete,
    func,
    select,
)
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from wedding.errors import ConflictError


def _new_id() -> str:
    return uuid.uuid4().hex


def _now() -> float:
    return time.time()


class DbClient(Protocol):
    """Interface for database access."""

    def save_rsvp(self, rsvp: "RsvpRecord") -> "RsvpRecord":
        ...

    def list_rsvps(self) -> list["RsvpRecord"]:
        ...

    def save_message(self, message: "MessageRecord") -> "MessageRecord":
        ...

    def list_messages(self) -> list["MessageRecord"]:
        ...

    def delete_message(self, message_id: str) -> bool:
        ...

    def save_playlist_entry(self, entry: "PlaylistEntryRecord") -> "PlaylistEntryRecord":
        ...

    def list_playlist_entries(self) -> list["PlaylistEntryRecord"]:
        ...

    def save_bingo_entry(self, entry: "BingoEntryRecord") -> "BingoEntryRecord":
        ...

    def list_bingo_entries(self, guest_name: str) -> list["BingoEntryRecord"]:
        ...

    def save_photo(self, photo: "PhotoRecord") -> "PhotoRecord":
        ...

    def get_photo(self, photo_id: str) -> Optional["PhotoRecord"]:
        ...

    def list_photos(
        self, gallery: str, offset: int = 0, limit: Optional[int] = None
    ) -> list["PhotoRecord"]:
        ...

    def count_guest_photos(self, gallery: str, guest_name: str) -> int:
        ...

    def delete_photo(self, photo_id: str) -> bool:
        ...

    def save_survey_answers(self, answers: list["SurveyAnswerRecord"]) -> None:
        ...

    def list_survey_answers(self) -> list["SurveyAnswerRecord"]:
        ...

    def save_trivia_result(self, result: "TriviaResultRecord") -> "TriviaResultRecord":
        ...

    def list_trivia_results(self) -> list["TriviaResultRecord"]:
        ...

    def list_milestones(self) -> list["MilestoneRecord"]:
        ...

    def get_milestone(self, milestone_id: str) -> Optional["MilestoneRecord"]:
        ...

    def save_milestone(self, milestone: "MilestoneRecord") -> "MilestoneRecord":
        ...

    def delete_milestone(self, milestone_id: str) -> bool:
        ...

    def reorder_milestones(self, ordered_ids: list[str]) -> None:
        ...

    def save_todo(self, todo: "TodoRecord") -> "TodoRecord":
        ...

    def get_todo(self, todo_id: str) -> Optional["TodoRecord"]:
        ...

    def list_todos(self, owner: str) -> list["TodoRecord"]:
        ...

    def delete_todo(self, todo_id: str) -> bool:
        ...


@dataclass
class RsvpRecord:
    guest_name: str
    attending: bool
    plus_one: bool = False
    plus_one_name: Optional[str] = None
    children: bool = False
    children_count: int = 0
    dietary_restrictions: Optional[str] = None
    message: Optional[str] = None
    id: str = field(default_factory=_new_id)
    created_at: float = field(default_factory=_now)
    updated_at: float = field(default_factory=_now)

    def headcount(self) -> int:
        if not self.attending:
            return 0
        return 1 + (1 if self.plus_one else 0) + self.children_count


@dataclass
class MessageRecord:
    guest_name: str
    message: str
    emoji: str
    id: str = field(default_factory=_new_id)
    created_at: float = field(default_factory=_now)


@dataclass
class PlaylistEntryRecord:
    guest_name: str
    song: str
    artist: Optional[str] = None
    id: str = field(default_factory=_new_id)
    created_at: float = field(default_factory=_now)


@dataclass
class BingoEntryRecord:
    guest_name: str
    challenge_id: int
    photo_url: str
    id: str = field(default_factory=_new_id)
    completed_at: float = field(default_factory=_now)


@dataclass
class PhotoRecord:
    gallery: str
    guest_name: str
    photo_url: str
    storage_path: str
    caption: Optional[str] = None
    bingo_challenge_id: Optional[int] = None
    id: str = field(default_factory=_new_id)
    created_at: float = field(default_factory=_now)


@dataclass
class SurveyAnswerRecord:
    guest_name: str
    question_id: int
    answer: str
    id: str = field(default_factory=_new_id)
    created_at: float = field(default_factory=_now)


@dataclass
class TriviaResultRecord:
    guest_name: str
    score: int
    total: int
    answers: dict = field(default_factory=dict)
    id: str = field(default_factory=_new_id)
    created_at: float = field(default_factory=_now)


@dataclass
class MilestoneRecord:
    title: str
    order: int
    date: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    spotify_url: Optional[str] = None
    id: str = field(default_factory=_new_id)
    created_at: float = field(default_factory=_now)
    updated_at: float = field(default_factory=_now)


@dataclass
class TodoRecord:
    owner: str
    text: str
    completed: bool = False
    id: str = field(default_factory=_new_id)
    created_at: float = field(default_factory=_now)


class InMemoryDbClient:
    """Simple in-memory database for development and tests.

    Dicts keep insertion order, so "newest first" is the reversed insertion
    order.
    """

    def __init__(self):
        self.rsvps: Dict[str, RsvpRecord] = {}
        self.messages: Dict[str, MessageRecord] = {}
        self.playlist: Dict[str, PlaylistEntryRecord] = {}
        self.bingo: Dict[str, BingoEntryRecord] = {}
        self.photos: Dict[str, PhotoRecord] = {}
        self.survey_answers: list[SurveyAnswerRecord] = []
        self.trivia_results: Dict[str, TriviaResultRecord] = {}
        self.milestones: Dict[str, MilestoneRecord] = {}
        self.todos: Dict[str, TodoRecord] = {}

    def reset(self) -> None:
        """Clear all stored data (useful in tests)."""
        self.rsvps.clear()
        self.messages.clear()
        self.playlist.clear()
        self.bingo.clear()
        self.photos.clear()
        self.survey_answers.clear()
        self.trivia_results.clear()
        self.milestones.clear()
        self.todos.clear()

    def save_rsvp(self, rsvp: RsvpRecord) -> RsvpRecord:
        self.rsvps[rsvp.id] = rsvp
        return rsvp

    def list_rsvps(self) -> list[RsvpRecord]:
        return list(reversed(self.rsvps.values()))

    def save_message(self, message: MessageRecord) -> MessageRecord:
        self.messages[message.id] = message
        return message

    def list_messages(self) -> list[MessageRecord]:
        return list(reversed(self.messages.values()))

    def delete_message(self, message_id: str) -> bool:
        return self.messages.pop(message_id, None) is not None

    def save_playlist_entry(self, entry: PlaylistEntryRecord) -> PlaylistEntryRecord:
        self.playlist[entry.id] = entry
        return entry

    def list_playlist_entries(self) -> list[PlaylistEntryRecord]:
        return list(reversed(self.playlist.values()))

    def save_bingo_entry(self, entry: BingoEntryRecord) -> BingoEntryRecord:
        for existing in self.bingo.values():
            if (
                existing.guest_name == entry.guest_name
                and existing.challenge_id == entry.challenge_id
            ):
                raise ConflictError("Bingo challenge already completed")
        self.bingo[entry.id] = entry
        return entry

    def list_bingo_entries(self, guest_name: str) -> list[BingoEntryRecord]:
        return [e for e in self.bingo.values() if e.guest_name == guest_name]

    def save_photo(self, photo: PhotoRecord) -> PhotoRecord:
        self.photos[photo.id] = photo
        return photo

    def get_photo(self, photo_id: str) -> Optional[PhotoRecord]:
        return self.photos.get(photo_id)

    def list_photos(
        self, gallery: str, offset: int = 0, limit: Optional[int] = None
    ) -> list[PhotoRecord]:
        items = [p for p in reversed(self.photos.values()) if p.gallery == gallery]
        end = None if limit is None else offset + limit
        return items[offset:end]

    def count_guest_photos(self, gallery: str, guest_name: str) -> int:
        return sum(
            1
            for p in self.photos.values()
            if p.gallery == gallery
            and p.guest_name == guest_name
            and p.bingo_challenge_id is None
        )

    def delete_photo(self, photo_id: str) -> bool:
        return self.photos.pop(photo_id, None) is not None

    def save_survey_answers(self, answers: list[SurveyAnswerRecord]) -> None:
        self.survey_answers.extend(answers)

    def list_survey_answers(self) -> list[SurveyAnswerRecord]:
        return list(self.survey_answers)

    def save_trivia_result(self, result: TriviaResultRecord) -> TriviaResultRecord:
        self.trivia_results[result.id] = result
        return result

    def list_trivia_results(self) -> list[TriviaResultRecord]:
        return list(self.trivia_results.values())

    def list_milestones(self) -> list[MilestoneRecord]:
        return sorted(self.milestones.values(), key=lambda m: m.order)

    def get_milestone(self, milestone_id: str) -> Optional[MilestoneRecord]:
        return self.milestones.get(milestone_id)

    def save_milestone(self, milestone: MilestoneRecord) -> MilestoneRecord:
        existing = self.milestones.get(milestone.id)
        if existing:
            milestone.created_at = existing.created_at
        milestone.updated_at = time.time()
        self.milestones[milestone.id] = milestone
        return milestone

    def delete_milestone(self, milestone_id: str) -> bool:
        return self.milestones.pop(milestone_id, None) is not None

    def reorder_milestones(self, ordered_ids: list[str]) -> None:
        now = time.time()
        for index, milestone_id in enumerate(ordered_ids):
            milestone = self.milestones.get(milestone_id)
            if milestone:
                milestone.order = index + 1
                milestone.updated_at = now

    def save_todo(self, todo: TodoRecord) -> TodoRecord:
        self.todos[todo.id] = todo
        return todo

    def get_todo(self, todo_id: str) -> Optional[TodoRecord]:
        return self.todos.get(todo_id)

    def list_todos(self, owner: str) -> list[TodoRecord]:
        return [t for t in reversed(self.todos.values()) if t.owner == owner]

    def delete_todo(self, todo_id: str) -> bool:
        return self.todos.pop(todo_id, None) is not None


class PostgresDbClient:
    """
    SQLAlchemy-backed implementation. Accepts any SQLAlchemy URL (e.g., Postgres or SQLite for tests).
    """

    def __init__(self, database_url: str):
        if not database_url:
            raise ValueError("DATABASE_URL is required for PostgresDbClient")
        self.engine = create_engine(
            database_url,
            future=True,
            pool_pre_ping=True,
            pool_recycle=1800,
        )
        self.Session = sessionmaker(
            bind=self.engine, class_=Session, expire_on_commit=False, future=True
        )
        Base.metadata.create_all(self.engine)

    # RSVP

    def save_rsvp(self, rsvp: RsvpRecord) -> RsvpRecord:
        with self.Session() as session:
            session.add(
                RsvpRow(
                    id=rsvp.id,
                    guest_name=rsvp.guest_name,
                    attending=rsvp.attending,
                    plus_one=rsvp.plus_one,
                    plus_one_name=rsvp.plus_one_name,
                    children=rsvp.children,
                    children_count=rsvp.children_count,
                    dietary_restrictions=rsvp.dietary_restrictions,
                    message=rsvp.message,
                    created_at=rsvp.created_at,
                    updated_at=rsvp.updated_at,
                )
            )
            session.commit()
        return rsvp

    def list_rsvps(self) -> list[RsvpRecord]:
        with self.Session() as session:
            rows = session.scalars(
                select(RsvpRow).order_by(RsvpRow.created_at.desc())
            ).all()
            return [
                RsvpRecord(
                    id=row.id,
                    guest_name=row.guest_name,
                    attending=row.attending,
                    plus_one=row.plus_one,
                    plus_one_name=row.plus_one_name,
                    children=row.children,
                    children_count=row.children_count,
                    dietary_restrictions=row.dietary_restrictions,
                    message=row.message,
                    created_at=row.created_at,
                    updated_at=row.updated_at,
                )
                for row in rows
            ]

    # Wall + playlist

    def save_message(self, message: MessageRecord) -> MessageRecord:
        with self.Session() as session:
            session.add(
                MessageRow(
                    id=message.id,
                    guest_name=message.guest_name,
                    message=message.message,
                    emoji=message.emoji,
                    created_at=message.created_at,
                )
            )
            session.commit()
        return message

    def list_messages(self) -> list[MessageRecord]:
        with self.Session() as session:
            rows = session.scalars(
                select(MessageRow).order_by(MessageRow.created_at.desc())
            ).all()
            return [
                MessageRecord(
                    id=row.id,
                    guest_name=row.guest_name,
                    message=row.message,
                    emoji=row.emoji,
                    created_at=row.created_at,
                )
                for row in rows
            ]

    def delete_message(self, message_id: str) -> bool:
        return self._delete_by_id(MessageRow, message_id)

    def save_playlist_entry(self, entry: PlaylistEntryRecord) -> PlaylistEntryRecord:
        with self.Session() as session:
            session.add(
                PlaylistEntryRow(
                    id=entry.id,
                    guest_name=entry.guest_name,
                    song=entry.song,
                    artist=entry.artist,
                    created_at=entry.created_at,
                )
            )
            session.commit()
        return entry

    def list_playlist_entries(self) -> list[PlaylistEntryRecord]:
        with self.Session() as session:
            rows = session.scalars(
                select(PlaylistEntryRow).order_by(PlaylistEntryRow.created_at.desc())
            ).all()
            return [
                PlaylistEntryRecord(
                    id=row.id,
                    guest_name=row.guest_name,
                    song=row.song,
                    artist=row.artist,
                    created_at=row.created_at,
                )
                for row in rows
            ]

    # Bingo

    def save_bingo_entry(self, entry: BingoEntryRecord) -> BingoEntryRecord:
        with self.Session() as session:
            existing = session.scalar(
                select(BingoEntryRow).where(
                    BingoEntryRow.guest_name == entry.guest_name,
                    BingoEntryRow.challenge_id == entry.challenge_id,
                )
            )
            if existing:
                raise ConflictError("Bingo challenge already completed")
            session.add(
                BingoEntryRow(
                    id=entry.id,
                    guest_name=entry.guest_name,
                    challenge_id=entry.challenge_id,
                    photo_url=entry.photo_url,
                    completed_at=entry.completed_at,
                )
            )
            try:
                session.commit()
            except IntegrityError as exc:
                session.rollback()
                raise ConflictError("Bingo challenge already completed") from exc
        return entry

    def list_bingo_entries(self, guest_name: str) -> list[BingoEntryRecord]:
        with self.Session() as session:
            rows = session.scalars(
                select(BingoEntryRow)
                .where(BingoEntryRow.guest_name == guest_name)
                .order_by(BingoEntryRow.completed_at.asc())
            ).all()
            return [
                BingoEntryRecord(
                    id=row.id,
                    guest_name=row.guest_name,
                    challenge_id=row.challenge_id,
                    photo_url=row.photo_url,
                    completed_at=row.completed_at,
                )
                for row in rows
            ]

    # Photos

    def _to_photo_record(self, row: "PhotoRow") -> PhotoRecord:
        return PhotoRecord(
            id=row.id,
            gallery=row.gallery,
            guest_name=row.guest_name,
            photo_url=row.photo_url,
            storage_path=row.storage_path,
            caption=row.caption,
            bingo_challenge_id=row.bingo_challenge_id,
            created_at=row.created_at,
        )

    def save_photo(self, photo: PhotoRecord) -> PhotoRecord:
        with self.Session() as session:
            session.add(
                PhotoRow(
                    id=photo.id,
                    gallery=photo.gallery,
                    guest_name=photo.guest_name,
                    photo_url=photo.photo_url,
                    storage_path=photo.storage_path,
                    caption=photo.caption,
                    bingo_challenge_id=photo.bingo_challenge_id,
                    created_at=photo.created_at,
                )
            )
            session.commit()
        return photo

    def get_photo(self, photo_id: str) -> Optional[PhotoRecord]:
        with self.Session() as session:
            row = session.get(PhotoRow, photo_id)
            return self._to_photo_record(row) if row else None

    def list_photos(
        self, gallery: str, offset: int = 0, limit: Optional[int] = None
    ) -> list[PhotoRecord]:
        with self.Session() as session:
            stmt = (
                select(PhotoRow)
                .where(PhotoRow.gallery == gallery)
                .order_by(PhotoRow.created_at.desc())
                .offset(offset)
            )
            if limit is not None:
                stmt = stmt.limit(limit)
            return [self._to_photo_record(row) for row in session.scalars(stmt).all()]

    def count_guest_photos(self, gallery: str, guest_name: str) -> int:
        with self.Session() as session:
            count = session.scalar(
                select(func.count())
                .select_from(PhotoRow)
                .where(
                    PhotoRow.gallery == gallery,
                    PhotoRow.guest_name == guest_name,
                    PhotoRow.bingo_challenge_id.is_(None),
                )
            )
            return count or 0

    def delete_photo(self, photo_id: str) -> bool:
        return self._delete_by_id(PhotoRow, photo_id)

    # Survey + trivia

    def save_survey_answers(self, answers: list[SurveyAnswerRecord]) -> None:
        with self.Session() as session:
            session.add_all(
                [
                    SurveyAnswerRow(
                        id=answer.id,
                        guest_name=answer.guest_name,
                        question_id=answer.question_id,
                        answer=answer.answer,
                        created_at=answer.created_at,
                    )
                    for answer in answers
                ]
            )
            session.commit()

    def list_survey_answers(self) -> list[SurveyAnswerRecord]:
        with self.Session() as session:
            rows = session.scalars(
                select(SurveyAnswerRow).order_by(SurveyAnswerRow.created_at.asc())
            ).all()
            return [
                SurveyAnswerRecord(
                    id=row.id,
                    guest_name=row.guest_name,
                    question_id=row.question_id,
                    answer=row.answer,
                    created_at=row.created_at,
                )
                for row in rows
            ]

    def save_trivia_result(self, result: TriviaResultRecord) -> TriviaResultRecord:
        with self.Session() as session:
            session.add(
                TriviaResultRow(
                    id=result.id,
                    guest_name=result.guest_name,
                    score=result.score,
                    total=result.total,
                    answers=result.answers,
                    created_at=result.created_at,
                )
            )
            session.commit()
        return result

    def list_trivia_results(self) -> list[TriviaResultRecord]:
        with self.Session() as session:
            rows = session.scalars(
                select(TriviaResultRow).order_by(TriviaResultRow.created_at.asc())
            ).all()
            return [
                TriviaResultRecord(
                    id=row.id,
                    guest_name=row.guest_name,
                    score=row.score,
                    total=row.total,
                    answers=row.answers,
                    created_at=row.created_at,
                )
                for row in rows
            ]

    # Our story

    def _to_milestone_record(self, row: "MilestoneRow") -> MilestoneRecord:
        return MilestoneRecord(
            id=row.id,
            order=row.order,
            date=row.date,
            title=row.title,
            description=row.description,
            image_url=row.image_url,
            spotify_url=row.spotify_url,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )

    def list_milestones(self) -> list[MilestoneRecord]:
        with self.Session() as session:
            rows = session.scalars(
                select(MilestoneRow).order_by(MilestoneRow.order.asc())
            ).all()
            return [self._to_milestone_record(row) for row in rows]

    def get_milestone(self, milestone_id: str) -> Optional[MilestoneRecord]:
        with self.Session() as session:
            row = session.get(MilestoneRow, milestone_id)
            return self._to_milestone_record(row) if row else None

    def save_milestone(self, milestone: MilestoneRecord) -> MilestoneRecord:
        now = time.time()
        with self.Session() as session:
            row = session.get(MilestoneRow, milestone.id)
            if row:
                row.order = milestone.order
                row.date = milestone.date
                row.title = milestone.title
                row.description = milestone.description
                row.image_url = milestone.image_url
                row.spotify_url = milestone.spotify_url
                row.updated_at = now
            else:
                row = MilestoneRow(
                    id=milestone.id,
                    order=milestone.order,
                    date=milestone.date,
                    title=milestone.title,
                    description=milestone.description,
                    image_url=milestone.image_url,
                    spotify_url=milestone.spotify_url,
                    created_at=milestone.created_at,
                    updated_at=now,
                )
                session.add(row)
            session.commit()
            session.refresh(row)
            return self._to_milestone_record(row)

    def delete_milestone(self, milestone_id: str) -> bool:
        return self._delete_by_id(MilestoneRow, milestone_id)

    def reorder_milestones(self, ordered_ids: list[str]) -> None:
        now = time.time()
        with self.Session() as session:
            for index, milestone_id in enumerate(ordered_ids):
                row = session.get(MilestoneRow, milestone_id)
                if row:
                    row.order = index + 1
                    row.updated_at = now
            session.commit()

    # To-do list

    def _to_todo_record(self, row: "TodoRow") -> TodoRecord:
        return TodoRecord(
            id=row.id,
            owner=row.owner,
            text=row.text,
            completed=row.completed,
            created_at=row.created_at,
        )

    def save_todo(self, todo: TodoRecord) -> TodoRecord:
        with self.Session() as session:
            row = session.get(TodoRow, todo.id)
            if row:
                row.text = todo.text
                row.completed = todo.completed
            else:
                session.add(
                    TodoRow(
                        id=todo.id,
                        owner=todo.owner,
                        text=todo.text,
                        completed=todo.completed,
                        created_at=todo.created_at,
                    )
                )
            session.commit()
        return todo

    def get_todo(self, todo_id: str) -> Optional[TodoRecord]:
        with self.Session() as session:
            row = session.get(TodoRow, todo_id)
            return self._to_todo_record(row) if row else None

    def list_todos(self, owner: str) -> list[TodoRecord]:
        with self.Session() as session:
            rows = session.scalars(
                select(TodoRow)
                .where(TodoRow.owner == owner)
                .order_by(TodoRow.created_at.desc())
            ).all()
            return [self._to_todo_record(row) for row in rows]

    def delete_todo(self, todo_id: str) -> bool:
        return self._delete_by_id(TodoRow, todo_id)

    def _delete_by_id(self, model, row_id: str) -> bool:
        with self.Session() as session:
            result = session.execute(delete(model).where(model.id == row_id))
            session.commit()
            return bool(result.rowcount)


Base = declarative_base()


class RsvpRow(Base):
    __tablename__ = "rsvp_entries"

    id = Column(String, primary_key=True)
    guest_name = Column(String, nullable=False, index=True)
    attending = Column(Boolean, nullable=False)
    plus_one = Column(Boolean, nullable=False, default=False)
    plus_one_name = Column(String, nullable=True)
    children = Column(Boolean, nullable=False, default=False)
    children_count = Column(Integer, nullable=False, default=0)
    dietary_restrictions = Column(String, nullable=True)
    message = Column(String, nullable=True)
    created_at = Column(Float, nullable=False)
    updated_at = Column(Float, nullable=False)


class MessageRow(Base):
    __tablename__ = "messages"

    id = Column(String, primary_key=True)
    guest_name = Column(String, nullable=False)
    message = Column(String, nullable=False)
    emoji = Column(String, nullable=False)
    created_at = Column(Float, nullable=False, index=True)


class PlaylistEntryRow(Base):
    __tablename__ = "playlist_entries"

    id = Column(String, primary_key=True)
    guest_name = Column(String, nullable=False)
    song = Column(String, nullable=False)
    artist = Column(String, nullable=True)
    created_at = Column(Float, nullable=False, index=True)


class BingoEntryRow(Base):
    __tablename__ = "bingo_entries"
    __table_args__ = (UniqueConstraint("guest_name", "challenge_id"),)

    id = Column(String, primary_key=True)
    guest_name = Column(String, nullable=False, index=True)
    challenge_id = Column(Integer, nullable=False)
    photo_url = Column(String, nullable=False)
    completed_at = Column(Float, nullable=False)


class PhotoRow(Base):
    __tablename__ = "photos"

    id = Column(String, primary_key=True)
    gallery = Column(String, nullable=False, index=True)
    guest_name = Column(String, nullable=False, index=True)
    photo_url = Column(String, nullable=False)
    storage_path = Column(String, nullable=False)
    caption = Column(String, nullable=True)
    bingo_challenge_id = Column(Integer, nullable=True)
    created_at = Column(Float, nullable=False, index=True)


class SurveyAnswerRow(Base):
    __tablename__ = "survey_answers"

    id = Column(String, primary_key=True)
    guest_name = Column(String, nullable=False, index=True)
    question_id = Column(Integer, nullable=False)
    answer = Column(String, nullable=False)
    created_at = Column(Float, nullable=False)


class TriviaResultRow(Base):
    __tablename__ = "trivia_results"

    id = Column(String, primary_key=True)
    guest_name = Column(String, nullable=False, index=True)
    score = Column(Integer, nullable=False)
    total = Column(Integer, nullable=False)
    answers = Column(JSON, nullable=False)
    created_at = Column(Float, nullable=False)


class MilestoneRow(Base):
    __tablename__ = "story_milestones"

    id = Column(String, primary_key=True)
    order = Column("orden", Integer, nullable=False, index=True)
    date = Column(String, nullable=True)
    title = Column(String, nullable=False)
    description = Column(String, nullable=True)
    image_url = Column(String, nullable=True)
    spotify_url = Column(String, nullable=True)
    created_at = Column(Float, nullable=False)
    updated_at = Column(Float, nullable=False)


class TodoRow(Base):
    __tablename__ = "todos"

    id = Column(String, primary_key=True)
    owner = Column(String, nullable=False, index=True)
    text = Column(String, nullable=False)
    completed = Column(Boolean, nullable=False, default=False)
    created_at = Column(Float, nullable=False)
