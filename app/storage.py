"""In-memory data store for LegalConnect.

Every entity lives in a private SQLite ``:memory:`` database owned by a
``MemStorage`` instance. Ids are assigned by SQLite AUTOINCREMENT so they grow
monotonically per entity type and are never reused. Nothing survives the
store object.
"""
import logging
import threading
from typing import Any, Dict, List, Optional, Type

from sqlalchemy import asc, desc, func, or_
from sqlalchemy.orm import sessionmaker

from app.database import Base, create_memory_engine
from app.lawyers.schemas import LawyerFilter
from app.models import (
    Case, CaseEvent, ChatConversation, ChatMessage, Consultation,
    LawData, LegalNews, Payment, User, UserRole
)

logger = logging.getLogger(__name__)

# Never overwritten by a partial update
PROTECTED_FIELDS = {"id", "created_at"}


class DuplicateRecordError(Exception):
    """Raised when an insert or update would break a uniqueness rule."""

    def __init__(self, entity: str, field: str, value: Any):
        self.entity = entity
        self.field = field
        self.value = value
        super().__init__(f"{entity} with {field} '{value}' already exists")


class InvalidUpdateError(ValueError):
    """Raised when a partial update would null out a required field."""


def normalize_law_code(code: str) -> str:
    return code.strip().upper()


class MemStorage:
    def __init__(self, engine=None):
        self.engine = engine or create_memory_engine()
        Base.metadata.create_all(bind=self.engine)
        self._session = sessionmaker(
            bind=self.engine, autoflush=False, expire_on_commit=False
        )()
        self._lock = threading.RLock()

    def close(self):
        with self._lock:
            self._session.close()
            self.engine.dispose()

    # =====================================================
    # GENERIC RECORD OPERATIONS
    # =====================================================

    def _get(self, model: Type[Base], record_id: int):
        with self._lock:
            return self._session.get(model, record_id)

    def _insert(self, model: Type[Base], data: Dict[str, Any]):
        """Assign the next id, stamp created_at and null out missing optionals."""
        values = {k: v for k, v in data.items() if k not in PROTECTED_FIELDS}
        for column in model.__table__.columns:
            if column.name in PROTECTED_FIELDS or column.default is not None:
                continue
            values.setdefault(column.name, None)

        record = model(**values)
        with self._lock:
            self._session.add(record)
            try:
                self._session.commit()
            except Exception:
                self._session.rollback()
                raise
            self._session.refresh(record)
        return record

    def _update(self, model: Type[Base], record_id: int, data: Dict[str, Any]):
        """Shallow-merge ``data`` over an existing record; None if absent."""
        with self._lock:
            record = self._session.get(model, record_id)
            if record is None:
                return None

            columns = model.__table__.columns
            changes = {
                field: value for field, value in data.items()
                if field not in PROTECTED_FIELDS and field in columns
            }
            for field, value in changes.items():
                if value is None and not columns[field].nullable:
                    raise InvalidUpdateError(f"{field} cannot be null")

            for field, value in changes.items():
                setattr(record, field, value)

            try:
                self._session.commit()
            except Exception:
                self._session.rollback()
                self._session.refresh(record)
                raise
            self._session.refresh(record)
            return record

    def _filter(self, model: Type[Base], *criteria, order_by=None) -> List[Any]:
        with self._lock:
            query = self._session.query(model).filter(*criteria)
            if order_by is None:
                order_by = (asc(model.id),)
            return query.order_by(*order_by).all()

    def _first(self, model: Type[Base], *criteria):
        with self._lock:
            return self._session.query(model).filter(*criteria).order_by(asc(model.id)).first()

    # =====================================================
    # USERS
    # =====================================================

    def get_user(self, user_id: int) -> Optional[User]:
        return self._get(User, user_id)

    def get_user_by_username(self, username: str) -> Optional[User]:
        return self._first(User, User.username == username)

    def get_user_by_email(self, email: str) -> Optional[User]:
        return self._first(User, User.email == email)

    def create_user(self, user_data: Dict[str, Any]) -> User:
        with self._lock:
            if self.get_user_by_username(user_data["username"]):
                raise DuplicateRecordError("User", "username", user_data["username"])
            if self.get_user_by_email(user_data["email"]):
                raise DuplicateRecordError("User", "email", user_data["email"])

            user = self._insert(User, user_data)
        logger.info(f"Created user {user.id} ({user.role.value})")
        return user

    def update_user(self, user_id: int, user_data: Dict[str, Any]) -> Optional[User]:
        with self._lock:
            for field in ("username", "email"):
                if field not in user_data:
                    continue
                existing = self._first(User, getattr(User, field) == user_data[field])
                if existing and existing.id != user_id:
                    raise DuplicateRecordError("User", field, user_data[field])
            return self._update(User, user_id, user_data)

    def get_lawyers(self) -> List[User]:
        return self._filter(User, User.role == UserRole.LAWYER)

    def get_filtered_lawyers(self, filters: LawyerFilter) -> List[User]:
        """Lawyers matching every supplied clause of ``filters``."""
        criteria = [User.role == UserRole.LAWYER]

        if filters.specialization:
            criteria.append(User.specialization == filters.specialization)
        if filters.experience is not None:
            criteria.append(func.coalesce(User.experience, 0) >= filters.experience)
        if filters.min_price is not None:
            criteria.append(func.coalesce(User.rate_per_hour, 0) >= filters.min_price)
        if filters.max_price is not None:
            criteria.append(func.coalesce(User.rate_per_hour, 0) <= filters.max_price)

        return self._filter(User, *criteria)

    # =====================================================
    # CASES
    # =====================================================

    def get_case(self, case_id: int) -> Optional[Case]:
        return self._get(Case, case_id)

    def get_case_by_number(self, case_number: str) -> Optional[Case]:
        return self._first(Case, Case.case_number == case_number)

    def get_cases_by_client_id(self, client_id: int) -> List[Case]:
        return self._filter(Case, Case.client_id == client_id)

    def get_cases_by_lawyer_id(self, lawyer_id: int) -> List[Case]:
        return self._filter(Case, Case.lawyer_id == lawyer_id)

    def create_case(self, case_data: Dict[str, Any]) -> Case:
        with self._lock:
            if self.get_case_by_number(case_data["case_number"]):
                raise DuplicateRecordError("Case", "case_number", case_data["case_number"])
            return self._insert(Case, case_data)

    def update_case(self, case_id: int, case_data: Dict[str, Any]) -> Optional[Case]:
        with self._lock:
            if "case_number" in case_data:
                existing = self.get_case_by_number(case_data["case_number"])
                if existing and existing.id != case_id:
                    raise DuplicateRecordError("Case", "case_number", case_data["case_number"])
            return self._update(Case, case_id, case_data)

    # =====================================================
    # CASE EVENTS
    # =====================================================

    def get_case_events(self, case_id: int) -> List[CaseEvent]:
        return self._filter(CaseEvent, CaseEvent.case_id == case_id)

    def create_case_event(self, event_data: Dict[str, Any]) -> CaseEvent:
        return self._insert(CaseEvent, event_data)

    # =====================================================
    # CONSULTATIONS
    # =====================================================

    def get_consultation(self, consultation_id: int) -> Optional[Consultation]:
        return self._get(Consultation, consultation_id)

    def get_consultations_by_client_id(self, client_id: int) -> List[Consultation]:
        return self._filter(Consultation, Consultation.client_id == client_id)

    def get_consultations_by_lawyer_id(self, lawyer_id: int) -> List[Consultation]:
        return self._filter(Consultation, Consultation.lawyer_id == lawyer_id)

    def create_consultation(self, consultation_data: Dict[str, Any]) -> Consultation:
        return self._insert(Consultation, consultation_data)

    def update_consultation(self, consultation_id: int, data: Dict[str, Any]) -> Optional[Consultation]:
        return self._update(Consultation, consultation_id, data)

    # =====================================================
    # LEGAL NEWS
    # =====================================================

    def get_legal_news(self) -> List[LegalNews]:
        """All news, most recently published first."""
        return self._filter(
            LegalNews,
            order_by=(desc(LegalNews.publish_date), asc(LegalNews.id))
        )

    def get_legal_news_by_category(self, category: str) -> List[LegalNews]:
        return self._filter(
            LegalNews,
            LegalNews.category == category,
            order_by=(desc(LegalNews.publish_date), asc(LegalNews.id))
        )

    def create_legal_news(self, news_data: Dict[str, Any]) -> LegalNews:
        return self._insert(LegalNews, news_data)

    # =====================================================
    # CHAT
    # =====================================================

    def get_chat_conversations(self, user_id: int) -> List[ChatConversation]:
        return self._filter(
            ChatConversation,
            ChatConversation.user_id == user_id,
            order_by=(desc(ChatConversation.created_at), desc(ChatConversation.id))
        )

    def get_chat_conversation(self, conversation_id: int) -> Optional[ChatConversation]:
        return self._get(ChatConversation, conversation_id)

    def create_chat_conversation(self, conversation_data: Dict[str, Any]) -> ChatConversation:
        return self._insert(ChatConversation, conversation_data)

    def get_chat_messages(self, conversation_id: int) -> List[ChatMessage]:
        """Messages of one conversation, oldest first."""
        return self._filter(
            ChatMessage,
            ChatMessage.conversation_id == conversation_id,
            order_by=(asc(ChatMessage.created_at), asc(ChatMessage.id))
        )

    def create_chat_message(self, message_data: Dict[str, Any]) -> ChatMessage:
        return self._insert(ChatMessage, message_data)

    # =====================================================
    # LAW DATA
    # =====================================================

    def get_law_data(self, code: str) -> Optional[LawData]:
        return self._first(LawData, LawData.code == normalize_law_code(code))

    def search_law_data(self, query: str) -> List[LawData]:
        """Case-insensitive substring search over code, section, title and description."""
        needle = query.lower()
        search_filter = or_(
            func.lower(LawData.code).contains(needle, autoescape=True),
            func.lower(LawData.section).contains(needle, autoescape=True),
            func.lower(LawData.title).contains(needle, autoescape=True),
            func.lower(LawData.description).contains(needle, autoescape=True)
        )
        return self._filter(LawData, search_filter)

    def create_law_data(self, law_data: Dict[str, Any]) -> LawData:
        law_data = {**law_data, "code": normalize_law_code(law_data["code"])}
        if not law_data["code"]:
            raise ValueError("Law code cannot be blank")
        with self._lock:
            if self.get_law_data(law_data["code"]):
                raise DuplicateRecordError("LawData", "code", law_data["code"])
            return self._insert(LawData, law_data)

    # =====================================================
    # PAYMENTS
    # =====================================================

    def get_payment(self, payment_id: int) -> Optional[Payment]:
        return self._get(Payment, payment_id)

    def get_payments_by_client_id(self, client_id: int) -> List[Payment]:
        return self._filter(Payment, Payment.client_id == client_id)

    def get_payments_by_lawyer_id(self, lawyer_id: int) -> List[Payment]:
        return self._filter(Payment, Payment.lawyer_id == lawyer_id)

    def create_payment(self, payment_data: Dict[str, Any]) -> Payment:
        payment = self._insert(Payment, payment_data)
        logger.info(f"Recorded payment {payment.id} of {payment.amount} ({payment.status.value})")
        return payment

    def update_payment(self, payment_id: int, data: Dict[str, Any]) -> Optional[Payment]:
        return self._update(Payment, payment_id, data)
