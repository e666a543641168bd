import pytest

from api_incidentes import create_app
from api_incidentes.config import TestingConfig
from api_incidentes.extensions import db
from api_incidentes.models import Citizen, Team
from api_incidentes.services import get_services


@pytest.fixture()
def app(tmp_path):
    # Isolated SQLite file per test
    class _Config(TestingConfig):
        SQLALCHEMY_DATABASE_URI = f"sqlite:///{tmp_path / 'test.db'}"

    a = create_app(_Config)
    yield a
    with a.app_context():
        db.session.remove()
        db.engine.dispose()


@pytest.fixture()
def non_atomic_app(tmp_path):
    class _Config(TestingConfig):
        SQLALCHEMY_DATABASE_URI = f"sqlite:///{tmp_path / 'test_non_atomic.db'}"
        INCIDENT_SAVE_ATOMIC = False

    a = create_app(_Config)
    yield a
    with a.app_context():
        db.session.remove()
        db.engine.dispose()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def db_session(app):
    with app.app_context():
        yield db.session
        db.session.remove()


@pytest.fixture()
def services(db_session):
    return get_services()


@pytest.fixture()
def citizen(db_session):
    c = Citizen(name="Ana Pérez", phone="+56911111111")
    db.session.add(c)
    db.session.commit()
    return c


@pytest.fixture()
def team(db_session):
    t = Team(name="Bomberos Primera Compañía")
    db.session.add(t)
    db.session.commit()
    return t
