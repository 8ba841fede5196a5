from __future__ import annotations

from datetime import datetime
from typing import Optional

from loguru import logger
from werkzeug.security import check_password_hash, generate_password_hash

from ..common.datetime_utils import now_utc, truncate_to_millis
from ..common.identifiers import new_id
from ..common.validators import optional_text, require_non_empty
from ..core.constants import MAX_TEXT_LENGTH, MAX_USERNAME_LENGTH
from ..core.exceptions import DuplicateKeyError, InstructorNotFoundError, InvalidCredentialError, ValidationError
from .model import Instructor, InstructorProfile
from .repository import InstructorRepository


class InstructorAuthService:
    """Use case: instructor login, creating the account on first use.

    Passwords are stored as salted werkzeug hashes and verified with
    check_password_hash (constant-time comparison).
    """

    def __init__(self, instructors: InstructorRepository):
        self._instructors = instructors

    def login_or_register(
        self,
        *,
        username: str,
        password: str,
        name: Optional[str] = None,
        email: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> InstructorProfile:
        username = require_non_empty(username, "username", max_length=MAX_USERNAME_LENGTH)
        if password is None or password == "":
            raise ValidationError("password is required")
        if not isinstance(password, str):
            raise ValidationError("password must be a string")

        instructor = self._instructors.get_by_username(username)
        if not instructor:
            created = self._register(username=username, password=password, name=name, email=email, now=now)
            if created:
                return created.profile()
            # A concurrent request created the same username first: authenticate against it.
            instructor = self._instructors.get_by_username(username)
            if not instructor:
                raise InvalidCredentialError("Invalid username or password")

        if not self._verify(instructor, password):
            logger.warning("Rejected login for instructor {}: wrong password", username)
            raise InvalidCredentialError("Invalid username or password")

        logger.info("Instructor {} logged in", username)
        return instructor.profile()

    def get_profile(self, instructor_id: str) -> InstructorProfile:
        instructor = self._instructors.get_by_id(instructor_id)
        if not instructor:
            raise InstructorNotFoundError(f"Instructor {instructor_id} not found")
        return instructor.profile()

    def _register(
        self,
        *,
        username: str,
        password: str,
        name: Optional[str],
        email: Optional[str],
        now: Optional[datetime],
    ) -> Optional[Instructor]:
        instructor = Instructor(
            id=new_id(),
            username=username,
            password_hash=generate_password_hash(password),
            name=optional_text(name, "name", max_length=MAX_TEXT_LENGTH),
            email=optional_text(email, "email", max_length=MAX_TEXT_LENGTH),
            created_at=truncate_to_millis(now or now_utc()),
        )
        try:
            self._instructors.create(instructor)
        except DuplicateKeyError:
            return None

        logger.info("Registered instructor {}", username)
        return instructor

    @staticmethod
    def _verify(instructor: Instructor, password: str) -> bool:
        try:
            return check_password_hash(instructor.password_hash, password)
        except ValueError:
            # e.g. placeholder or corrupted hash values
            return False
