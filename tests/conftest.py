"""
Test configuration for the clinic records package.
"""
import pytest
from datetime import date, time
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from clinic.database import Base
from clinic.appointments.service import schedule_appointment
from clinic.doctors.service import create_doctor
from clinic.patients.service import create_patient

# Test database URL
TEST_DATABASE_URL = "sqlite://"

# Create test database engine
engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

# Create test session factory
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db():
    """
    Create a fresh database for each test.
    """
    # Create tables
    Base.metadata.create_all(bind=engine)

    # Create session
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()

    # Drop tables after test
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def patient(db):
    """A registered patient."""
    return create_patient(db, {
        "name": "Juan Pérez",
        "birth_date": date(1990, 3, 15),
        "phone": "3001112233",
        "email": "juan.perez@example.com",
        "address": "Calle 10 #12-34",
    })


@pytest.fixture
def doctor(db):
    """A registered doctor."""
    return create_doctor(db, {
        "name": "Andrés Ruiz",
        "specialty": "Cardiología",
        "phone": "6041111111",
        "email": "aruiz@clinica.com",
        "consultation_schedule": "Lunes a Viernes 8-12",
    })


@pytest.fixture
def appointment(db, patient, doctor):
    """A scheduled appointment between the patient and doctor fixtures."""
    return schedule_appointment(db, {
        "patient_id": patient.id,
        "doctor_id": doctor.id,
        "appointment_date": date(2025, 11, 6),
        "appointment_time": time(9, 0),
        "reason": "Control de presión",
    })


@pytest.fixture
def test_engine():
    """The engine backing the db fixture."""
    return engine


@pytest.fixture
def session_factory():
    """Session factory bound to the test engine."""
    return TestingSessionLocal
