import pytest

from api_incidentes.models import IncidentType
from api_incidentes.services import NotFoundError, ValidationError


def test_save_and_find(services):
    saved = services.incident_types.save(IncidentType(name="Incendio"))
    assert services.incident_types.find_by_id(saved.id).name == "Incendio"


@pytest.mark.parametrize("name", [None, "", "   "])
def test_save_requires_name(services, name):
    with pytest.raises(ValidationError, match="El nombre del Tipo de incidente es requerido"):
        services.incident_types.save(IncidentType(name=name))
    assert services.incident_types.find_all() == []


def test_name_length_boundary(services):
    services.incident_types.save(IncidentType(name="n" * 50))
    with pytest.raises(ValidationError, match="no puede exceder los 50 caracteres"):
        services.incident_types.save(IncidentType(name="n" * 51))


def test_update_partial(services):
    incident_type = services.incident_types.save(IncidentType(name="Incendio"))
    services.incident_types.update(IncidentType(name="Incendio estructural"), incident_type.id)
    assert services.incident_types.find_by_id(incident_type.id).name == "Incendio estructural"


def test_update_blank_name_rejected(services):
    incident_type = services.incident_types.save(IncidentType(name="Rescate"))
    with pytest.raises(ValidationError):
        services.incident_types.update(IncidentType(name=""), incident_type.id)


def test_delete_missing(services):
    with pytest.raises(NotFoundError, match="Tipo de incidente no encontrado con ID: 7"):
        services.incident_types.delete(7)
