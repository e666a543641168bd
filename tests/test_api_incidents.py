"""HTTP tests for incidents and their assignment endpoints."""

import pytest

from api_incidentes.extensions import db
from api_incidentes.models import Citizen, Team

BASE_URL = '/api-incidentes/v1/incidentes'
STATES_URL = '/api-incidentes/v1/estados-incidentes'
TYPES_URL = '/api-incidentes/v1/tipos-incidentes'
LOCATIONS_URL = '/api-incidente/v1/ubicaciones'


def _payload(**overrides):
    data = {
        'title': 'Incendio en bodega',
        'detail': 'Humo visible desde la calle',
        'citizen': {'name': 'Ana Pérez', 'phone': '+56911111111'},
        'team': {'name': 'Bomberos'},
        'state': {'detail': 'Abierto'},
        'type': {'name': 'Incendio'},
        'location': {'street': 'Main St', 'number': 100, 'district': 'Centro', 'region': 'Metropolitana'},
    }
    data.update(overrides)
    return data


@pytest.fixture()
def incident_id(client):
    resp = client.post(BASE_URL, json=_payload())
    assert resp.status_code == 201
    return resp.get_json()['id']


@pytest.fixture()
def external_ids(app):
    with app.app_context():
        citizen = Citizen(name='Pedro Soto', phone='+56922222222')
        team = Team(name='Rescate Norte')
        db.session.add_all([citizen, team])
        db.session.commit()
        return citizen.id, team.id


def test_empty_list(client):
    assert client.get(BASE_URL).status_code == 204


def test_create_persists_related_entities(client, incident_id):
    resp = client.get(f'{BASE_URL}/{incident_id}')
    assert resp.status_code == 200
    body = resp.get_json()
    assert body['title'] == 'Incendio en bodega'
    assert body['state']['detail'] == 'Abierto'
    assert body['location']['number'] == 100
    assert body['citizen']['name'] == 'Ana Pérez'

    # The cascade created the catalog rows as well
    assert len(client.get(STATES_URL).get_json()) == 1
    assert len(client.get(TYPES_URL).get_json()) == 1
    assert len(client.get(LOCATIONS_URL).get_json()) == 1


def test_create_message(client):
    resp = client.post(BASE_URL, json=_payload())
    assert resp.get_json()['message'] == 'Incidente creado con éxito.'


def test_create_with_long_title_creates_nothing(client):
    resp = client.post(BASE_URL, json=_payload(title='t' * 51))
    assert resp.status_code == 400
    assert 'El Titulo no puede exceder 50 caracteres' in resp.get_json()['error']
    assert client.get(BASE_URL).status_code == 204
    assert client.get(STATES_URL).status_code == 204
    assert client.get(LOCATIONS_URL).status_code == 204


def test_create_without_relation(client):
    payload = _payload()
    del payload['team']
    resp = client.post(BASE_URL, json=payload)
    assert resp.status_code == 400
    assert resp.get_json()['error'] == 'Error al guardar el incidente: El equipo es requerido'


def test_create_reusing_existing_state(client):
    state_id = client.post(STATES_URL, json={'detail': 'Abierto'}).get_json()['id']
    resp = client.post(BASE_URL, json=_payload(state={'id': state_id}))
    assert resp.status_code == 201
    assert len(client.get(STATES_URL).get_json()) == 1


def test_nested_unknown_field(client):
    resp = client.post(BASE_URL, json=_payload(location={'street': 'Main St', 'floor': 3}))
    assert resp.status_code == 400
    assert resp.get_json()['details'][0]['loc'] == ['location', 'floor']


def test_update_partial(client, incident_id):
    resp = client.put(f'{BASE_URL}/{incident_id}', json={'detail': 'Fuego controlado'})
    assert resp.status_code == 200
    assert resp.get_json() == {'message': 'Actualizado con éxito', 'id': incident_id}

    body = client.get(f'{BASE_URL}/{incident_id}').get_json()
    assert body['detail'] == 'Fuego controlado'
    assert body['title'] == 'Incendio en bodega'


def test_update_unknown_incident(client):
    resp = client.put(f'{BASE_URL}/9', json={'title': 'Nada'})
    assert resp.status_code == 404
    assert resp.get_json() == {'error': 'Incidente no encontrado'}


def test_update_invalid(client, incident_id):
    resp = client.put(f'{BASE_URL}/{incident_id}', json={'detail': 'd' * 401})
    assert resp.status_code == 400
    assert resp.get_json()['error'].startswith('Error al actualizar incidente')


def test_delete(client, incident_id):
    resp = client.delete(f'{BASE_URL}/{incident_id}')
    assert resp.status_code == 200
    assert resp.get_json() == {'message': 'Incidente eliminado con éxito.', 'id': incident_id}
    assert client.get(f'{BASE_URL}/{incident_id}').status_code == 404


def test_state_in_use_cannot_be_deleted(client, incident_id):
    state_id = client.get(f'{BASE_URL}/{incident_id}').get_json()['state']['id']
    resp = client.delete(f'{STATES_URL}/{state_id}')
    assert resp.status_code == 400
    assert client.get(f'{STATES_URL}/{state_id}').status_code == 200


def test_assign_citizen_and_team(client, incident_id, external_ids):
    citizen_id, team_id = external_ids

    resp = client.post(f'{BASE_URL}/{incident_id}/asignar-ciudadano/{citizen_id}')
    assert resp.status_code == 200
    assert resp.get_json() == {'message': 'Ciudadano asignado al Incidente exitosamente'}

    resp = client.post(f'{BASE_URL}/{incident_id}/asignar-equipo/{team_id}')
    assert resp.status_code == 200

    body = client.get(f'{BASE_URL}/{incident_id}').get_json()
    assert body['citizen']['id'] == citizen_id
    assert body['team']['name'] == 'Rescate Norte'


def test_assign_catalog_entries(client, incident_id):
    state_id = client.post(STATES_URL, json={'detail': 'Cerrado'}).get_json()['id']
    type_id = client.post(TYPES_URL, json={'name': 'Rescate'}).get_json()['id']
    location_id = client.post(
        LOCATIONS_URL,
        json={'street': 'Otra', 'number': 7, 'district': 'Norte', 'region': 'Valparaíso'},
    ).get_json()['id']

    assert client.post(f'{BASE_URL}/{incident_id}/asignar-estado-incidente/{state_id}').status_code == 200
    assert client.post(f'{BASE_URL}/{incident_id}/asignar-tipo-incidente/{type_id}').status_code == 200
    assert client.post(f'{BASE_URL}/{incident_id}/asignar-ubicacion/{location_id}').status_code == 200

    body = client.get(f'{BASE_URL}/{incident_id}').get_json()
    assert body['state']['detail'] == 'Cerrado'
    assert body['type']['name'] == 'Rescate'
    assert body['location']['street'] == 'Otra'


def test_assign_missing_citizen_keeps_reference(client, incident_id):
    before = client.get(f'{BASE_URL}/{incident_id}').get_json()['citizen']['id']

    resp = client.post(f'{BASE_URL}/{incident_id}/asignar-ciudadano/999')
    assert resp.status_code == 404
    assert resp.get_json() == {'error': 'Ciudadano no encontrado'}

    assert client.get(f'{BASE_URL}/{incident_id}').get_json()['citizen']['id'] == before


def test_assign_to_missing_incident(client, external_ids):
    citizen_id, _ = external_ids
    resp = client.post(f'{BASE_URL}/404/asignar-ciudadano/{citizen_id}')
    assert resp.status_code == 404
    assert resp.get_json() == {'error': 'Incidente no encontrado'}


def test_update_merges_referenced_state(client, incident_id):
    state_id = client.get(f'{BASE_URL}/{incident_id}').get_json()['state']['id']

    resp = client.put(f'{BASE_URL}/{incident_id}', json={'state': {'id': state_id, 'detail': 'En curso'}})
    assert resp.status_code == 200
    assert client.get(f'{STATES_URL}/{state_id}').get_json() == {'id': state_id, 'detail': 'En curso'}


def test_update_rejects_invalid_referenced_state(client, incident_id):
    state_id = client.get(f'{BASE_URL}/{incident_id}').get_json()['state']['id']

    resp = client.put(f'{BASE_URL}/{incident_id}', json={'state': {'id': state_id, 'detail': 'x' * 80}})
    assert resp.status_code == 400
    assert 'El valor Detalle excede máximo de caracteres (50)' in resp.get_json()['error']
    assert client.get(f'{STATES_URL}/{state_id}').get_json()['detail'] == 'Abierto'


def test_create_with_out_of_range_related_id(client):
    resp = client.post(BASE_URL, json=_payload(state={'id': 99999999999999999999}))
    assert resp.status_code == 400
    assert resp.get_json()['details'][0]['loc'] == ['state', 'id']
    assert client.get(BASE_URL).status_code == 204


@pytest.mark.parametrize(
    'url',
    [
        f'{BASE_URL}/99999999999999999999',
        f'{STATES_URL}/99999999999999999999',
        f'{TYPES_URL}/99999999999999999999',
        f'{LOCATIONS_URL}/99999999999999999999',
    ],
)
def test_get_with_out_of_range_id(client, url):
    assert client.get(url).status_code == 404


def test_assign_with_out_of_range_incident(client, external_ids):
    citizen_id, _ = external_ids
    resp = client.post(f'{BASE_URL}/99999999999999999999/asignar-ciudadano/{citizen_id}')
    assert resp.status_code == 404
    assert resp.get_json() == {'error': 'Incidente no encontrado'}


def test_incident_carries_timestamps(client, incident_id):
    body = client.get(f'{BASE_URL}/{incident_id}').get_json()
    assert body['created_at']
    assert body['updated_at']
