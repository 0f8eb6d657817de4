from typing import Generator

import pytest
from faker import Faker
from sqlalchemy import create_engine, StaticPool
from sqlalchemy.orm import sessionmaker, Session

from models.base import Base
from services.scaffold_module_service import ScaffoldModule
from services.template_service import TemplateService
from tests.record_models import Address, Person

fake = Faker()

# Test database setup
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={
        "check_same_thread": False,
    },
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session() -> Generator[Session, None, None]:
    """Create a test database session."""
    Base.metadata.create_all(bind=engine)

    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def sample_person(db_session: Session) -> Person:
    """Create a sample person with an address."""
    address = Address(city=fake.city())
    person = Person(
        first_name=fake.first_name(),
        email=fake.email(),
        age=fake.random_int(min=18, max=90),
        address=address,
    )
    db_session.add(person)
    db_session.commit()
    db_session.refresh(person)
    return person


@pytest.fixture
def templates() -> TemplateService:
    """Template service over the shipped field templates."""
    return TemplateService()


@pytest.fixture
def template_dir(tmp_path):
    """Minimal template tree: a fallback family and one type-specific partial."""
    root = tmp_path / "templates"
    (root / "fields" / "key").mkdir(parents=True)
    (root / "fields" / "text").mkdir(parents=True)
    (root / "fields" / "key" / "index.html").write_text("key:{{ field.value() }}")
    (root / "fields" / "key" / "edit.html").write_text("key-edit:{{ field.name() }}")
    (root / "fields" / "text" / "index.html").write_text("text:{{ field.value() }}")
    return root


@pytest.fixture
def scaffold_module() -> ScaffoldModule:
    """Fresh sort registry, independent of the process-wide one."""
    return ScaffoldModule()
